import ast
import importlib
import inspect
import logging
import sys
import textwrap
import threading
import types
import typing
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .constants import IntrospectionRules
from .domain.models import Member, TypeDescriptor
from .exceptions import NotSupportedError, TypeNotFoundError, raise_type_not_found


logger = logging.getLogger(__name__)

_NONE_TYPE = type(None)
_UNION_ORIGINS = (typing.Union, getattr(types, "UnionType", typing.Union))


# --- Helper Functions ---
def qualified_name(cls: type) -> str:
    """Return ``module.QualName`` for a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _is_public(name: str) -> bool:
    return not name.startswith(IntrospectionRules.PRIVATE_PREFIX)


def _is_class_var(hint: Any) -> bool:
    if isinstance(hint, typing.ForwardRef):
        hint = hint.__forward_arg__
    if hint is typing.ClassVar or typing.get_origin(hint) is typing.ClassVar:
        return True
    return isinstance(hint, str) and hint.split("[", 1)[0] in ("ClassVar", "typing.ClassVar")


def _normalize_hint(hint: Any) -> Any:
    """Map missing and ``None`` annotations to None."""
    if hint is None or hint is _NONE_TYPE or hint is inspect.Parameter.empty:
        return None
    return hint


def _module_namespace(obj: Any) -> Dict[str, Any]:
    module = sys.modules.get(getattr(obj, "__module__", None) or "")
    return vars(module) if module is not None else {}


def _evaluate_annotation(annotation: Any, globalns: Dict[str, Any]) -> Any:
    """Evaluate one annotation, including nested string references, or raise."""
    holder = types.SimpleNamespace(__annotations__={"hint": annotation})
    return typing.get_type_hints(holder, globalns)["hint"]


def _annotation_or_forward_ref(annotation: Any, globalns: Dict[str, Any], module: Optional[str]) -> Any:
    """
    Evaluate an annotation. One that cannot be evaluated is kept as a
    ForwardRef bound to ``module``, to be resolved again when it is walked.
    """
    try:
        return _evaluate_annotation(annotation, globalns)
    except Exception as e:
        logger.debug(f"Annotation {annotation!r} in {module} left unresolved: {e}")
    if not isinstance(annotation, str):
        return annotation
    try:
        return typing.ForwardRef(annotation, module=module)
    except SyntaxError:
        return annotation


def _safe_type_hints(obj: Any) -> Dict[str, Any]:
    """
    Resolve type hints. When one annotation cannot be evaluated, every
    annotation is evaluated on its own, so only that one stays unresolved.
    """
    try:
        return typing.get_type_hints(obj)
    except Exception as e:
        logger.debug(f"Resolving annotations of {obj!r} one by one: {e}")

    owners = list(reversed(obj.__mro__)) if inspect.isclass(obj) else [obj]
    hints: Dict[str, Any] = {}
    for owner in owners:
        globalns = getattr(owner, "__globals__", None) or _module_namespace(owner)
        for attribute, annotation in inspect.get_annotations(owner).items():
            hints[attribute] = _annotation_or_forward_ref(annotation, globalns, owner.__module__)
    return hints


def _method_parameters(func: Callable[..., Any]) -> Optional[list]:
    """Parameters after ``self``, excluding ``*args``/``**kwargs``."""
    try:
        parameters = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return None
    return [
        parameter for parameter in parameters[1:]
        if parameter.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]


def import_type(path: str) -> type:
    """
    Import a class from a dotted ``package.module.ClassName`` path.

    Nested classes (``module.Outer.Inner``) are supported.
    """
    parts = path.strip().split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError:
            continue
        try:
            for attribute in parts[split:]:
                target = getattr(target, attribute)
        except AttributeError:
            break
        if inspect.isclass(target):
            return target
        raise_type_not_found(path)
    raise_type_not_found(path, reason="could not be imported")


# --- Reflection-based catalog ---
class TypeIntrospector:
    """
    Describes Python classes by reflection.

    Readable members are public annotated attributes, readable properties,
    ``__slots__`` entries, attributes assigned in the class's own
    ``__init__`` and public methods taking no argument besides ``self``.
    Writable members are the same attributes, settable properties and
    public methods taking exactly one argument. Attributes created anywhere
    other than ``__init__`` are not seen.

    Annotations are evaluated in the declaring module. One that cannot be
    evaluated is kept as a ForwardRef and fails only when it is walked into.

    Descriptors are cached per class for the lifetime of the introspector.
    The cache is guarded by a lock so one introspector can serve several
    threads building different type maps.
    """

    def __init__(self):
        self._cache: Dict[type, TypeDescriptor] = {}
        self._lock = threading.RLock()

    def describe(self, type_id: Any) -> TypeDescriptor:
        """
        Return the descriptor for a class, a dotted path or a type hint.

        Raises:
            TypeNotFoundError: If ``type_id`` does not name a class
            NotSupportedError: If ``type_id`` is a hint that cannot be reduced to one class
        """
        if isinstance(type_id, TypeDescriptor):
            return type_id
        cls = self._resolve_class(type_id)
        with self._lock:
            descriptor = self._cache.get(cls)
            if descriptor is None:
                descriptor = self._build_descriptor(cls)
                self._cache[cls] = descriptor
                logger.debug(
                    f"Introspected {descriptor.name}: {len(descriptor.fields)} fields, "
                    f"{len(descriptor.accessors)} accessors, {len(descriptor.mutators)} mutators"
                )
            return descriptor

    def cached_types(self) -> Iterable[type]:
        with self._lock:
            return list(self._cache)

    def _resolve_class(self, type_id: Any) -> type:
        if isinstance(type_id, str):
            return import_type(type_id)
        if isinstance(type_id, typing.ForwardRef):
            return self._resolve_forward_ref(type_id)

        origin = typing.get_origin(type_id)
        if origin is typing.Annotated:
            return self._resolve_class(typing.get_args(type_id)[0])
        if origin in _UNION_ORIGINS:
            candidates = [arg for arg in typing.get_args(type_id) if arg is not _NONE_TYPE]
            if len(candidates) == 1:
                return self._resolve_class(candidates[0])
            raise NotSupportedError(
                f"Union type {type_id!r} does not name a single class",
                feature="union result types",
            )
        if origin is not None:
            raise NotSupportedError(
                f"Generic type {type_id!r} cannot be walked into member by member",
                feature="generic result types",
            )

        if not inspect.isclass(type_id):
            raise_type_not_found(repr(type_id))
        return type_id

    def _resolve_forward_ref(self, reference: typing.ForwardRef) -> type:
        """Evaluate a reference in its declaring module, or import it as a dotted path."""
        name = reference.__forward_arg__
        module = sys.modules.get(reference.__forward_module__ or "")
        if module is None:
            return import_type(name)
        try:
            target = _evaluate_annotation(name, vars(module))
        except Exception as e:
            logger.debug(f"Cannot resolve {name!r} in {module.__name__}: {e}")
            raise_type_not_found(name, reason=f"is not defined in module {module.__name__}")
        return self._resolve_class(target)

    def _build_descriptor(self, cls: type) -> TypeDescriptor:
        name = qualified_name(cls)
        hints = _safe_type_hints(cls)
        fields: Dict[str, Member] = {}
        accessors: Dict[str, Member] = {}
        mutators: Dict[str, Member] = {}

        # Walk base classes first so a subclass declaration replaces the base one
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            for attribute in inspect.get_annotations(klass):
                if not _is_public(attribute):
                    continue
                accessors.pop(attribute, None)
                mutators.pop(attribute, None)
                hint = hints.get(attribute)
                if _is_class_var(hint):
                    fields.pop(attribute, None)
                else:
                    fields[attribute] = Member.field(attribute, name, _normalize_hint(hint))

            for attribute in self._slot_names(klass):
                if _is_public(attribute) and attribute not in fields:
                    fields[attribute] = Member.field(attribute, name)

            for attribute, value in vars(klass).items():
                if not _is_public(attribute):
                    continue
                if isinstance(value, property):
                    accessors.pop(attribute, None)
                    mutators.pop(attribute, None)
                    fields[attribute] = Member.field(
                        attribute,
                        name,
                        self._return_hint(value.fget) if value.fget else None,
                        readable=value.fget is not None,
                        writable=value.fset is not None,
                    )
                elif inspect.isfunction(value):
                    fields.pop(attribute, None)
                    self._add_method(name, attribute, value, accessors, mutators)

            for attribute, hint in self._init_attributes(klass):
                if attribute not in fields and attribute not in accessors and attribute not in mutators:
                    fields[attribute] = Member.field(attribute, name, _normalize_hint(hint))

        return TypeDescriptor(
            name=name,
            python_type=cls,
            fields=tuple(fields.values()),
            accessors=tuple(accessors.values()),
            mutators=tuple(mutators.values()),
        )

    def _add_method(
        self,
        type_name: str,
        attribute: str,
        func: Callable[..., Any],
        accessors: Dict[str, Member],
        mutators: Dict[str, Member],
    ) -> None:
        # An override replaces whatever the base class declared under that name
        accessors.pop(attribute, None)
        mutators.pop(attribute, None)

        parameters = _method_parameters(func)
        if parameters is None:
            return
        if len(parameters) == IntrospectionRules.ACCESSOR_ARITY:
            accessors[attribute] = Member.accessor(attribute, type_name, self._return_hint(func))
        elif len(parameters) == IntrospectionRules.MUTATOR_ARITY:
            hints = _safe_type_hints(func)
            mutators[attribute] = Member.mutator(
                attribute, type_name, _normalize_hint(hints.get(parameters[0].name))
            )

    @staticmethod
    def _return_hint(func: Callable[..., Any]) -> Any:
        return _normalize_hint(_safe_type_hints(func).get("return"))

    @staticmethod
    def _init_attributes(klass: type) -> List[Tuple[str, Any]]:
        """
        Public ``self.<name> = ...`` assignments in the class's own ``__init__``.

        An attribute assigned straight from an annotated parameter takes that
        parameter's annotation as its type.
        """
        init = vars(klass).get("__init__")
        if not inspect.isfunction(init):
            return []
        try:
            tree = ast.parse(textwrap.dedent(inspect.getsource(init)))
        except (OSError, TypeError, SyntaxError) as e:
            logger.debug(f"No source for {qualified_name(klass)}.__init__: {e}")
            return []

        parameter_hints = _safe_type_hints(init)
        attributes: Dict[str, Any] = {}
        for node in ast.walk(tree):
            if isinstance(node, ast.Assign):
                targets, value = node.targets, node.value
            elif isinstance(node, ast.AnnAssign):
                targets, value = [node.target], node.value
            else:
                continue
            for target in targets:
                if not (
                    isinstance(target, ast.Attribute)
                    and isinstance(target.value, ast.Name)
                    and target.value.id == "self"
                    and _is_public(target.attr)
                ):
                    continue
                hint = None
                if isinstance(value, ast.Name):
                    hint = parameter_hints.get(value.id)
                attributes.setdefault(target.attr, hint)
        return list(attributes.items())

    @staticmethod
    def _slot_names(klass: type) -> Iterable[str]:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            return (slots,)
        return tuple(slots)


# --- Synthetic catalog ---
class StaticTypeCatalog:
    """
    Catalog of hand-written descriptors keyed by type name.

    Member result types refer to other registered descriptors by name, which
    makes it possible to build type maps for schemas that have no Python
    class behind them.
    """

    def __init__(self, descriptors: Iterable[TypeDescriptor] = ()):
        self._descriptors: Dict[str, TypeDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: TypeDescriptor) -> TypeDescriptor:
        self._descriptors[descriptor.name] = descriptor
        return descriptor

    def describe(self, type_id: Any) -> TypeDescriptor:
        if isinstance(type_id, TypeDescriptor):
            return type_id
        if not isinstance(type_id, str) or type_id not in self._descriptors:
            raise_type_not_found(str(type_id), reason="is not registered in the catalog")
        return self._descriptors[type_id]

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._descriptors
