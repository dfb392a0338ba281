"""
Unit tests for derive_data_tags.

Tests default substitution for data classification flags.
Dependencies: pytest, infra_tags.utils.tags
System role: Data sensitivity tag validation
"""

import pytest

from infra_tags.configs.base import DataSensitivity
from infra_tags.utils.tags import derive_data_tags


class TestDeriveDataTags:
    """Test suite for derive_data_tags."""

    def test_empty_flags_default_to_false(self):
        """Absent booleans render as 'false', absent role as None."""
        pairs = derive_data_tags(DataSensitivity())

        assert pairs == [
            ("data.role", None),
            ("data.is-master", "false"),
            ("data.is-public", "false"),
        ]

    def test_all_flags_set(self):
        """Set values are rendered as lowercase strings."""
        pairs = derive_data_tags(DataSensitivity(role="archive", is_master=True, is_public=True))

        assert pairs == [
            ("data.role", "archive"),
            ("data.is-master", "true"),
            ("data.is-public", "true"),
        ]

    @pytest.mark.parametrize("is_master", [None, False, True])
    @pytest.mark.parametrize("is_public", [None, False, True])
    def test_boolean_tags_always_present(self, is_master, is_public):
        """is-master and is-public are never empty."""
        pairs = dict(derive_data_tags(DataSensitivity(is_master=is_master, is_public=is_public)))

        assert pairs["data.is-master"] in {"true", "false"}
        assert pairs["data.is-public"] in {"true", "false"}
