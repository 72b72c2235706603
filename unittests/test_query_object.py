from dataclasses import dataclass, field
from typing import Optional

import pytest
from typeguard import TypeCheckError

from fluentrules import PropertyDescriptor, ValidationRules
from fluentrules.utils import property_value


@dataclass
class Address:
    city: str
    zip_code: Optional[str] = None


@dataclass
class Customer:
    name: str
    address: Optional[Address]
    tags: dict[str, str] = field(default_factory=dict)


class TestPropertyValue:
    customer = Customer(name="John Doe", address=Address(city="Leipzig"), tags={"segment": "b2c"})

    @pytest.mark.parametrize(
        "name, expected",
        [
            pytest.param("name", "John Doe", id="attribute"),
            pytest.param("address.city", "Leipzig", id="nested attribute"),
            pytest.param("tags.segment", "b2c", id="mapping key"),
            pytest.param("address.street", None, id="missing attribute"),
            pytest.param("tags.channel", None, id="missing key"),
            pytest.param("address.zip_code", None, id="None value"),
        ],
    )
    def test_property_value(self, name: str, expected):
        assert property_value(self.customer, PropertyDescriptor(name=name)) == expected

    def test_missing_parent(self):
        customer = Customer(name="Jane Doe", address=None)
        assert property_value(customer, PropertyDescriptor(name="address.city")) is None

    def test_object_rules_get_the_object(self):
        assert property_value(self.customer, PropertyDescriptor()) is self.customer

    def test_expected_type(self):
        assert property_value(self.customer, PropertyDescriptor(name="address.city"), str) == "Leipzig"
        with pytest.raises(TypeCheckError, match="address.city"):
            property_value(self.customer, PropertyDescriptor(name="address.city"), int)

    def test_evaluate_declared_rules(self):
        rules = (
            ValidationRules.ensure(lambda customer: customer.address.city)
            .required()
            .ensure_object()
            .satisfies(lambda value, obj: value.name != "")
            .rules
        )
        city_rule, object_rule = rules[0]
        assert property_value(self.customer, city_rule.property) == "Leipzig"
        assert property_value(self.customer, object_rule.property) is self.customer
        assert all(rule.condition(property_value(self.customer, rule.property), self.customer) for rule in rules[0])
