"""Tests for the filter builder domain service."""

import pytest

from ec2target.domain.errors import TagParseError, UnsupportedTargetTypeError
from ec2target.domain.services.filter_builder import (
    RUNNING_STATE_FILTER,
    build_filters,
    parse_tag_pairs,
)
from ec2target.domain.value_objects.target_spec import TargetSpec, TargetType


def _api(spec: TargetSpec) -> list[dict]:
    return [f.to_api() for f in build_filters(spec)]


RUNNING = {"Name": "instance-state-name", "Values": ["running"]}


class TestBuildFilters:
    def test_instance_id_has_no_state_filter(self):
        spec = TargetSpec(TargetType.INSTANCE_ID, "i-0123456789abcdef0")
        assert _api(spec) == [
            {"Name": "instance-id", "Values": ["i-0123456789abcdef0"]},
        ]

    def test_private_dns(self):
        spec = TargetSpec(TargetType.PRIVATE_DNS, "ip-10-0-0-1.ec2.internal")
        assert _api(spec) == [
            {"Name": "private-dns-name", "Values": ["ip-10-0-0-1.ec2.internal"]},
            RUNNING,
        ]

    def test_name_tag(self):
        spec = TargetSpec(TargetType.NAME_TAG, "web-01")
        assert _api(spec) == [
            {"Name": "tag:Name", "Values": ["web-01"]},
            RUNNING,
        ]

    def test_tags(self):
        spec = TargetSpec(TargetType.TAGS, "env:prod,team:infra")
        assert _api(spec) == [
            RUNNING,
            {"Name": "tag:env", "Values": ["prod"]},
            {"Name": "tag:team", "Values": ["infra"]},
        ]

    def test_single_tag(self):
        spec = TargetSpec(TargetType.TAGS, "role:bastion")
        assert _api(spec) == [RUNNING, {"Name": "tag:role", "Values": ["bastion"]}]

    def test_malformed_tags_rejected(self):
        with pytest.raises(TagParseError):
            build_filters(TargetSpec(TargetType.TAGS, "badsegment"))

    def test_type_outside_enum_rejected(self):
        spec = TargetSpec("ssh-config", "web-01")
        with pytest.raises(UnsupportedTargetTypeError, match="ssh-config"):
            build_filters(spec)

    def test_running_filter_constant(self):
        assert RUNNING_STATE_FILTER.to_api() == RUNNING

    def test_filters_built_fresh_per_call(self):
        spec = TargetSpec(TargetType.NAME_TAG, "web-01")
        first = build_filters(spec)
        first.append(RUNNING_STATE_FILTER)
        assert len(build_filters(spec)) == 2


class TestParseTagPairs:
    def test_pairs_in_order(self):
        assert parse_tag_pairs("env:prod,team:infra") == [
            ("env", "prod"),
            ("team", "infra"),
        ]

    def test_empty_value_allowed(self):
        assert parse_tag_pairs("owner:") == [("owner", "")]

    @pytest.mark.parametrize(
        "raw, bad_segment",
        [
            ("badsegment", "badsegment"),
            ("env:prod,badsegment", "badsegment"),
            ("a:b:c", "a:b:c"),
            (":prod", ":prod"),
            ("env:prod,", ""),
        ],
    )
    def test_malformed_segment(self, raw, bad_segment):
        with pytest.raises(TagParseError) as exc_info:
            parse_tag_pairs(raw)
        assert exc_info.value.segment == bad_segment
