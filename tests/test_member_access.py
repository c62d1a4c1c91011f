"""
Unit tests for member getters, setters and object creators.
"""
import unittest

import sample_types
from convention_mapper.domain.models import Member, TypeDescriptor
from convention_mapper.exceptions import NotSupportedError
from convention_mapper.member_access import (
    ChainGetter,
    ClosureGetter,
    ConstantGetter,
    FieldGetter,
    FieldSetter,
    MemberAccessFactory,
    MethodGetter,
    MethodSetter,
)
from convention_mapper.object_creators import ClosureObjectCreator, SimpleObjectCreator


class TestMemberAccessFactory(unittest.TestCase):

    def setUp(self):
        self.factory = MemberAccessFactory()

    def test_single_field_getter(self):
        getter = self.factory.create_member_getter([Member.field("email", "Customer")])
        self.assertIsInstance(getter, FieldGetter)
        self.assertEqual(getter.get_value(sample_types.Customer(email="a@b.c")), "a@b.c")

    def test_single_method_getter(self):
        getter = self.factory.create_member_getter([Member.accessor("get_first_name", "Customer")])
        self.assertIsInstance(getter, MethodGetter)
        self.assertEqual(getter.get_value(sample_types.Customer(first_name="Ada")), "Ada")

    def test_chain_getter(self):
        getter = self.factory.create_member_getter([
            Member.accessor("get_address", "Customer"),
            Member.field("street", "Address"),
        ])
        address = sample_types.Address()
        address.street = "1 Main St"

        self.assertIsInstance(getter, ChainGetter)
        self.assertEqual(getter.get_value(sample_types.Customer(address=address)), "1 Main St")

    def test_chain_getter_stops_on_none(self):
        getter = self.factory.create_member_getter([
            Member.accessor("get_address", "Customer"),
            Member.field("street", "Address"),
        ])
        self.assertIsNone(getter.get_value(sample_types.Customer(address=None)))

    def test_empty_chain_is_rejected(self):
        with self.assertRaises(ValueError):
            self.factory.create_member_getter([])

    def test_field_setter(self):
        setter = self.factory.create_member_setter(Member.field("age", "CustomerDto"))
        dto = sample_types.CustomerDto()
        setter.set_value(dto, 42)

        self.assertIsInstance(setter, FieldSetter)
        self.assertEqual(dto.age, 42)

    def test_method_setter(self):
        setter = self.factory.create_member_setter(Member.mutator("set_email", "CustomerDto"))
        dto = sample_types.CustomerDto()
        setter.set_value(dto, "a@b.c")

        self.assertIsInstance(setter, MethodSetter)
        self.assertEqual(dto.email, "a@b.c")


class TestCustomGetters(unittest.TestCase):

    def test_closure_getter(self):
        getter = ClosureGetter(lambda customer: customer.get_first_name().upper())
        self.assertEqual(getter.get_value(sample_types.Customer(first_name="ada")), "ADA")

    def test_constant_getter(self):
        self.assertEqual(ConstantGetter(7).get_value(object()), 7)


class TestObjectCreators(unittest.TestCase):

    def test_simple_object_creator(self):
        creator = SimpleObjectCreator(TypeDescriptor(name="Point", python_type=sample_types.Point))
        self.assertIsInstance(creator.create(), sample_types.Point)

    def test_simple_object_creator_needs_a_class(self):
        creator = SimpleObjectCreator(TypeDescriptor(name="Synthetic"))
        with self.assertRaises(NotSupportedError):
            creator.create()

    def test_closure_object_creator(self):
        creator = ClosureObjectCreator(lambda: sample_types.Point(1, 2))
        self.assertEqual(creator.create().x, 1)


if __name__ == '__main__':
    unittest.main()
