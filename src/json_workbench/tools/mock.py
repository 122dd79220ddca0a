"""Mock data generation from JSON templates.

A template is JSON text whose string values may contain ``{{provider.path}}``
placeholders, e.g. ``{"name": "{{person.fullName}}", "email": "{{internet.email}}"}``.
Placeholders are filled from Faker; anything that cannot be resolved is left
verbatim so the user can see which path was wrong.
"""

import json
import logging
import re
from datetime import date, datetime
from typing import Any

from faker import Faker

from json_workbench.utils.helpers import camel_to_snake

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^}]+)\}\}")

SAMPLE_TEMPLATE = json.dumps({
    "id": "{{string.uuid}}",
    "name": "{{person.fullName}}",
    "email": "{{internet.email}}",
    "avatar": "{{image.avatar}}",
    "active": True,
}, indent=2)


class MockDataGenerator:
    """Fills JSON templates with fake values."""

    # Dotted template paths whose Faker method name differs from the last segment
    PATH_ALIASES = {
        "person.fullname": "name",
        "person.firstname": "first_name",
        "person.lastname": "last_name",
        "person.jobtitle": "job",
        "internet.email": "email",
        "internet.username": "user_name",
        "internet.url": "url",
        "internet.ip": "ipv4",
        "internet.ipv6": "ipv6",
        "internet.domainname": "domain_name",
        "internet.password": "password",
        "string.uuid": "uuid4",
        "string.alpha": "pystr",
        "image.avatar": "image_url",
        "image.url": "image_url",
        "phone.number": "phone_number",
        "location.city": "city",
        "location.country": "country",
        "location.streetaddress": "street_address",
        "location.zipcode": "postcode",
        "location.state": "state",
        "company.name": "company",
        "lorem.word": "word",
        "lorem.sentence": "sentence",
        "lorem.paragraph": "paragraph",
        "date.past": "past_datetime",
        "date.future": "future_datetime",
        "date.recent": "date_time_this_month",
        "date.birthdate": "date_of_birth",
        "number.int": "random_int",
        "number.float": "pyfloat",
        "datatype.boolean": "pybool",
        "finance.amount": "pricetag",
        "finance.currencycode": "currency_code",
        "commerce.productname": "catch_phrase",
    }

    # Faker attributes that configure the instance rather than produce values
    BLOCKED_METHODS = frozenset({
        "seed", "seed_instance", "seed_locale", "add_provider", "get_providers",
        "provider", "set_formatter", "get_formatter", "format", "parse",
    })

    def __init__(self, seed: int | None = None, locale: str | None = None):
        """Initialize the generator.

        Args:
            seed: Optional random seed for deterministic output
            locale: Optional Faker locale (e.g. ``en_US``)
        """
        self._seed = seed
        self._faker = Faker(locale) if locale else Faker()
        if seed is not None:
            self._faker.seed_instance(seed)

    def generate(self, template: str, count: int = 1) -> list[Any]:
        """Generate ``count`` records from a JSON template.

        Args:
            template: JSON text with ``{{path}}`` placeholders
            count: Number of records

        Returns:
            Generated records, or an empty list when the template is not valid JSON
        """
        try:
            parsed = json.loads(template)
        except ValueError as e:
            logger.warning("Mock template is not valid JSON: %s", e)
            return []

        return [self.fill(parsed) for _ in range(max(count, 0))]

    def fill(self, value: Any) -> Any:
        """Fill placeholders in every string of a template value."""
        if isinstance(value, str):
            return PLACEHOLDER_PATTERN.sub(self._replace, value)
        if isinstance(value, list):
            return [self.fill(item) for item in value]
        if isinstance(value, dict):
            return {key: self.fill(item) for key, item in value.items()}
        return value

    def resolve(self, path: str) -> str | None:
        """Produce a fake value for a dotted path, or None if it cannot be resolved."""
        path = path.strip()
        method_name = self.PATH_ALIASES.get(path.lower())
        if method_name is None:
            method_name = camel_to_snake(path.split(".")[-1])

        if method_name.startswith("_") or method_name in self.BLOCKED_METHODS:
            return None

        try:
            method = getattr(self._faker, method_name)
        except AttributeError:
            return None
        if not callable(method):
            return None

        try:
            value = method()
        except (TypeError, ValueError) as e:
            logger.debug("Faker method %s failed: %s", method_name, e)
            return None

        if isinstance(value, (datetime, date)):
            return value.isoformat()
        return str(value)

    def _replace(self, match: re.Match) -> str:
        value = self.resolve(match.group(1))
        if value is None:
            return match.group(0)
        return value


def generate_mock_data(template: str, count: int = 1, seed: int | None = None) -> list[Any]:
    """Convenience function to generate mock records from a template.

    Args:
        template: JSON template text
        count: Number of records
        seed: Optional random seed

    Returns:
        Generated records (empty for an invalid template)
    """
    return MockDataGenerator(seed=seed).generate(template, count)
