# -*- coding: utf-8 -*-
"""
Tests for ISO 19650 container names.
"""

import pytest

from services.naming import (
    ContainerName,
    generate_container_name,
    get_status_description,
    parse_container_name,
)


class TestGenerate:
    """Test building container names."""

    def test_all_defaults(self):
        assert generate_container_name() == "XXXXX-BPG-XX-XX-T-O-0001_S0_P01"

    def test_given_components(self):
        name = generate_container_name(project="BP2501", originator="BAI", functional="ZZ",
                                       spatial="01", form="M3", discipline="A", number="0042",
                                       status="S2", revision="P03")

        assert name == "BP2501-BAI-ZZ-01-M3-A-0042_S2_P03"

    def test_none_takes_default(self):
        assert generate_container_name(project=None) == "XXXXX-BPG-XX-XX-T-O-0001_S0_P01"

    def test_unknown_component_rejected(self):
        with pytest.raises(TypeError):
            generate_container_name(colour="blue")


class TestParse:
    """Test splitting container names."""

    def test_parse_components(self):
        parsed = parse_container_name("BP2501-BAI-ZZ-01-M3-A-0042_S2_P03")

        assert parsed == ContainerName("BP2501", "BAI", "ZZ", "01", "M3", "A", "0042", "S2", "P03")
        assert parsed.to_dict()["revision"] == "P03"

    def test_generated_name_parses_back(self):
        name = generate_container_name(project="BP2501", discipline="S")

        assert str(parse_container_name(name)) == name

    def test_revision_keeps_remaining_text(self):
        parsed = parse_container_name("P-O-F-S-T-A-0001_S0_P01_draft")

        assert parsed.revision == "P01_draft"

    @pytest.mark.parametrize("filename", [
        "BP2501-BAI-ZZ-01-M3-A-0042",
        "BP2501-BAI-ZZ-01-M3_S2_P03",
        "notes.pdf",
        "",
        None,
    ])
    def test_malformed_name_returns_none(self, filename):
        assert parse_container_name(filename) is None


class TestStatusDescription:
    """Test status code labels."""

    @pytest.mark.parametrize("code,label", [
        ("S0", "Work in Progress (WIP)"),
        ("S3", "Suitable for Review and Comment"),
        ("S5", "Suitable for Contractor Design"),
        ("A2", "Published - Amended"),
    ])
    def test_known_codes(self, code, label):
        assert get_status_description(code) == label

    def test_unknown_code(self):
        assert get_status_description("Z9") == "Unknown"
