"""
Tests for the validators module.
"""
from datetime import datetime, timedelta, timezone
from unittest import TestCase

from django.core.exceptions import ValidationError

from plugin_directory.lib.validators import validate_utc_datetime


class ValidateUTCDatetimeTestCase(TestCase):
    """
    Only UTC-aware datetimes pass.
    """

    def test_utc(self):
        validate_utc_datetime(datetime(2024, 1, 1, tzinfo=timezone.utc))

    def test_other_timezone(self):
        with self.assertRaises(ValidationError):
            validate_utc_datetime(datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=2))))

    def test_naive(self):
        with self.assertRaises(ValidationError):
            validate_utc_datetime(datetime(2024, 1, 1))
