"""Unit tests for fastacheck.profile module."""

from dataclasses import replace

import pytest

from fastacheck.profile import SARS_COV_2, ValidationProfile


class TestValidationProfile:
    """Test profile construction and records."""

    def test_sars_cov_2_defaults(self):
        """Test default thresholds and metadata."""
        assert SARS_COV_2.name == 'SARS-CoV-2'
        assert SARS_COV_2.min_length == 50
        assert SARS_COV_2.max_length == 30000
        assert SARS_COV_2.max_n_fraction == 0.5
        assert SARS_COV_2.max_seqid_length == 24

    def test_new_record(self):
        """Test records carry the profile metadata."""
        profile = ValidationProfile(organism='Influenza A virus', strand='double')
        record = profile.new_record('>flu1')

        assert record.seqid == '>flu1'
        assert record.organism == 'Influenza A virus'
        assert record.strand == 'double'
        assert record.genetic_code == '1'

    def test_replace_thresholds(self):
        """Test overriding thresholds keeps the rest."""
        profile = replace(SARS_COV_2, min_length=100)

        assert profile.min_length == 100
        assert profile.organism == SARS_COV_2.organism

    def test_min_above_max(self):
        """Test inverted bounds are rejected."""
        with pytest.raises(ValueError, match='must not exceed'):
            ValidationProfile(min_length=100, max_length=50)

    @pytest.mark.parametrize('fraction', [0.0, -0.1, 1.5])
    def test_invalid_n_fraction(self, fraction):
        """Test N fraction must be in (0, 1]."""
        with pytest.raises(ValueError):
            ValidationProfile(max_n_fraction=fraction)

    def test_invalid_seqid_length(self):
        """Test identifier limit must leave room for content."""
        with pytest.raises(ValueError):
            ValidationProfile(max_seqid_length=1)

    def test_frozen(self):
        """Test profiles are immutable."""
        with pytest.raises(AttributeError):
            SARS_COV_2.min_length = 1
