from __future__ import annotations
import logging
from types import SimpleNamespace

import pytest

from password_rules import ASCII_PUNCTUATION, PasswordValidator, PolicyConfigError, PolicySettings, build_rules


def test_default_rule_order():
    names = [r.name for r in build_rules()]
    assert names == ["uppercase", "lowercase", "digit", "special", "min_length", "no_whitespace", "history"]


def test_disabled_rules_keep_relative_order():
    settings = PolicySettings(require_lower=False, require_special=False, check_history=False)
    names = [r.name for r in build_rules(settings)]
    assert names == ["uppercase", "digit", "min_length", "no_whitespace"]


def test_min_length_setting():
    v = PasswordValidator(settings=PolicySettings(min_length=8))
    assert v.check("UserP@s1").valid
    res = v.check("UsP@s1")
    assert res.messages == ("Password should be at least 8 characters long",)


def test_invalid_min_length():
    for bad in (0, -3, "12", True):
        with pytest.raises(PolicyConfigError):
            build_rules(PolicySettings(min_length=bad))


def test_enumerated_special_chars():
    v = PasswordValidator(settings=PolicySettings(special_chars=ASCII_PUNCTUATION))
    assert v.check("UserP@ssw0rD").valid
    # non-ASCII letters are special only under the broad definition
    assert v.check("UserPässw0rD").messages == ("Password should have at least one special character",)
    assert PasswordValidator().check("UserPässw0rD").valid


def test_special_chars_are_escaped():
    v = PasswordValidator(settings=PolicySettings(special_chars="]^-\\"))
    assert v.check("UserPass]w0rd").valid
    assert v.check("UserPass\\w0rd").valid
    assert not v.check("UserPass@w0rd").valid


def test_empty_special_chars_rejected():
    with pytest.raises(PolicyConfigError):
        PasswordValidator(settings=PolicySettings(special_chars=""))


def test_foreign_settings_object_uses_defaults():
    rules = build_rules(SimpleNamespace(check_history=False))
    assert [r.name for r in rules][-1] == "no_whitespace"
    assert len(rules) == 6


def test_rules_and_settings_are_exclusive():
    with pytest.raises(PolicyConfigError):
        PasswordValidator(build_rules(), settings=PolicySettings())


def test_config_error_is_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="password_rules"):
        with pytest.raises(PolicyConfigError):
            build_rules(PolicySettings(min_length=0))
    assert any("min_length" in r.getMessage() for r in caplog.records)


def test_password_never_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="password_rules"):
        PasswordValidator().check("S3cret Value!", {"Old S3cret!"})
    assert caplog.records
    assert not any("S3cret" in r.getMessage() for r in caplog.records)



def test_oversized_min_length_rejected():
    with pytest.raises(PolicyConfigError):
        PasswordValidator(settings=PolicySettings(min_length=2**32))


def test_non_string_special_chars_rejected():
    for bad in (5, ["!", "?"]):
        with pytest.raises(PolicyConfigError):
            build_rules(PolicySettings(special_chars=bad))

if __name__ == "__main__":
    test_default_rule_order()
    test_disabled_rules_keep_relative_order()
    test_min_length_setting()
    test_invalid_min_length()
    test_enumerated_special_chars()
    test_special_chars_are_escaped()
    test_empty_special_chars_rejected()
    test_foreign_settings_object_uses_defaults()
    test_rules_and_settings_are_exclusive()
    test_oversized_min_length_rejected()
    test_non_string_special_chars_rejected()
    print("password_rules policy tests passed")
