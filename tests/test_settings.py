import dataclasses

import pytest

from cdnorigin.settings import Config


def test_defaults_disable_deletion_and_leave_strings_empty():
    cfg = Config()
    assert cfg.deletion_enabled is False
    assert cfg.default_origin_domain == ""
    assert cfg.cloudfront_default_caching_policy_id == ""


def test_config_is_immutable():
    cfg = Config(default_origin_domain="test.default.origin")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.default_origin_domain = "other"  # type: ignore[misc]
    assert cfg.default_origin_domain == "test.default.origin"


def test_replace_changes_only_given_field():
    cfg = Config(
        cloudfront_price_class="test price class",
        cloudfront_default_caching_policy_id="4135ea2d-6df8-44a3-9df3-4b5a84be39ad",
    )
    changed = dataclasses.replace(cfg, deletion_enabled=True)
    assert changed.deletion_enabled is True
    assert changed.cloudfront_price_class == cfg.cloudfront_price_class
    assert changed.cloudfront_default_caching_policy_id == cfg.cloudfront_default_caching_policy_id
    assert cfg.deletion_enabled is False


def test_equal_configs_compare_equal():
    first = Config(cloudfront_description_template="test description: {{group}}")
    second = Config(cloudfront_description_template="test description: {{group}}")
    assert first == second
    assert first != Config()