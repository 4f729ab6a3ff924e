"""Tests for the format validators."""

from __future__ import annotations

import pytest

from valdox import DateTimeOffset, IpVersion, UrlProtocol, UrlSecurity, Validator


class TestEmail:
    @pytest.mark.parametrize(
        "value", ["test@example.com", "user.name@domain.co.uk", "user+tag@example.com"]
    )
    def test_valid(self, v: Validator, value: str) -> None:
        assert v.string.email().test(value)

    @pytest.mark.parametrize("value", ["notanemail", "@example.com", "test@", "a@b.c"])
    def test_invalid(self, v: Validator, value: str) -> None:
        assert not v.string.email().test(value)

    def test_message(self, v: Validator) -> None:
        errors: list[str] = []
        assert not v.string.email().test("notanemail", "email", errors)
        assert errors == [
            "ValidationError: 'email' received \"notanemail\", expected a valid email address."
        ]


class TestUuid:
    @pytest.mark.parametrize(
        "value",
        [
            "123e4567-e89b-12d3-a456-426614174000",
            "550e8400-e29b-41d4-a716-446655440000",
            "550E8400-E29B-41D4-B716-446655440000",
        ],
    )
    def test_valid(self, v: Validator, value: str) -> None:
        assert v.string.uuid().test(value)

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "123e4567-e89b-12d3-a456",
            "123e4567-e89b-02d3-a456-426614174000",  # version 0
            "123e4567-e89b-92d3-a456-426614174000",  # version 9
            "123e4567-e89b-12d3-c456-426614174000",  # variant c
        ],
    )
    def test_invalid(self, v: Validator, value: str) -> None:
        assert not v.string.uuid().test(value)


class TestUrl:
    def test_http_family(self, v: Validator) -> None:
        validator = v.string.url(UrlProtocol.HTTP, UrlSecurity.ALL)
        assert validator.test("http://example.com")
        assert validator.test("https://example.com")
        assert validator.test("https://example.com/path?q=1#frag")
        assert not validator.test("ws://example.com")
        assert not validator.test("not-a-url")
        assert not validator.test("http://exa mple.com")

    def test_ws_family(self, v: Validator) -> None:
        validator = v.string.url(UrlProtocol.WS, UrlSecurity.ALL)
        assert validator.test("ws://example.com")
        assert validator.test("wss://example.com")
        assert not validator.test("http://example.com")

    def test_all_protocols(self, v: Validator) -> None:
        validator = v.string.url()
        for url in ("http://example.com", "https://example.com", "ws://a.io", "wss://a.io"):
            assert validator.test(url)

    def test_security_flags(self, v: Validator) -> None:
        secure = v.string.url(UrlProtocol.ALL, UrlSecurity.SECURE)
        assert secure.test("https://example.com")
        assert secure.test("wss://example.com")
        assert not secure.test("http://example.com")

        plain = v.string.url(UrlProtocol.HTTP, UrlSecurity.NON_SECURE)
        assert plain.test("http://example.com")
        assert not plain.test("https://example.com")


class TestDateTime:
    def test_global_without_offset(self, v: Validator) -> None:
        validator = v.string.date_time.global_(DateTimeOffset.NONE)
        assert validator.test("2023-12-25T10:30:00Z")
        assert validator.test("2023-12-25T10:30:00.123Z")
        assert not validator.test("2023-12-25T10:30:00+05:00")
        assert not validator.test("2023-12-25T10:30:00")

    def test_global_optional_offset(self, v: Validator) -> None:
        validator = v.string.date_time.global_(DateTimeOffset.OPTIONAL)
        assert validator.test("2023-12-25T10:30:00Z")
        assert validator.test("2023-12-25T10:30:00+05:00")
        assert validator.test("2023-12-25T10:30:00-05:00")
        assert validator.test("2023-12-25T10:30:00")

    def test_global_required_offset(self, v: Validator) -> None:
        validator = v.string.date_time.global_(DateTimeOffset.REQUIRED)
        assert validator.test("2023-12-25T10:30:00Z")
        assert validator.test("2023-12-25T10:30:00+05:00")
        assert not validator.test("2023-12-25T10:30:00")

    def test_global_message(self, v: Validator) -> None:
        errors: list[str] = []
        assert not v.string.date_time.global_().test("invalid", "datetime", errors)
        assert len(errors) == 1
        assert "'datetime'" in errors[0]

    def test_local(self, v: Validator) -> None:
        validator = v.string.date_time.local()
        assert validator.test("2023-12-25T10:30:00")
        assert validator.test("2023-12-25T23:59:59")
        assert validator.test("2023-01-01T00:00:00")
        assert validator.test("2023-01-01T00:00")
        assert not validator.test("2023-12-25T24:00:00")
        assert not validator.test("2023-13-25T10:30:00")
        assert not validator.test("2023-12-25T10:30:00Z")

    def test_date(self, v: Validator) -> None:
        validator = v.string.date()
        assert validator.test("2023-12-25")
        assert validator.test("2023-01-01")
        assert validator.test("2023-02-28")
        assert validator.test("2023-02-31")  # no per-month day count
        assert not validator.test("2023-13-01")
        assert not validator.test("2023-12-32")
        assert not validator.test("2023-00-10")
        assert not validator.test("23-12-25")

    def test_time(self, v: Validator) -> None:
        validator = v.string.time()
        assert validator.test("10:30:00")
        assert validator.test("23:59:59")
        assert validator.test("00:00:00")
        assert validator.test("10:30")
        assert validator.test("10:30:00.123")
        assert not validator.test("24:00:00")
        assert not validator.test("10:60:00")
        assert not validator.test("10:30.123")


class TestIp:
    def test_v4(self, v: Validator) -> None:
        validator = v.string.ip(IpVersion.V4, False)
        assert validator.test("192.168.1.1")
        assert validator.test("0.0.0.0")
        assert validator.test("255.255.255.255")
        assert not validator.test("256.1.1.1")
        assert not validator.test("192.168.1")
        assert not validator.test("192.168.1.1/24")

    def test_v4_prefix_length(self, v: Validator) -> None:
        validator = v.string.ip(IpVersion.V4, True)
        assert validator.test("192.168.1.1/24")
        assert validator.test("10.0.0.0/8")
        assert validator.test("10.0.0.0/0")
        assert validator.test("10.0.0.0/32")
        assert validator.test("10.0.0.1")
        assert not validator.test("192.168.1.1/33")

    def test_v6(self, v: Validator) -> None:
        validator = v.string.ip(IpVersion.V6, False)
        assert validator.test("2001:0db8:85a3:0000:0000:8a2e:0370:7334")
        assert validator.test("2001:db8:85a3::8a2e:370:7334")
        assert validator.test("::1")
        assert validator.test("::")
        assert validator.test("fe80::")
        assert not validator.test("not-an-ipv6")
        assert not validator.test("2001:db8::1::2")
        assert not validator.test("2001:db8::/32")

    def test_v6_prefix_length(self, v: Validator) -> None:
        validator = v.string.ip(IpVersion.V6, True)
        assert validator.test("2001:db8::/32")
        assert validator.test("2001:db8::/128")
        assert not validator.test("2001:db8::/129")


class TestMac:
    def test_default_separator(self, v: Validator) -> None:
        validator = v.string.mac()
        assert validator.test("00:11:22:33:44:55")
        assert validator.test("AA:BB:CC:DD:EE:FF")
        assert not validator.test("00-11-22-33-44-55")
        assert not validator.test("00:11:22:33:44")

    def test_hyphen_separator(self, v: Validator) -> None:
        validator = v.string.mac("-")
        assert validator.test("00-11-22-33-44-55")
        assert not validator.test("00:11:22:33:44:55")

    def test_no_separator(self, v: Validator) -> None:
        validator = v.string.mac("")
        assert validator.test("001122334455")
        assert not validator.test("00:11:22:33:44:55")

    def test_separator_is_literal(self, v: Validator) -> None:
        validator = v.string.mac(".")
        assert validator.test("00.11.22.33.44.55")
        assert not validator.test("00x11x22x33x44x55")


class TestAsciiDigits:
    """Digit positions accept only 0-9, not other Unicode decimal digits."""

    def test_date(self, v: Validator) -> None:
        assert not v.string.date().test("٢٠٢٣-12-25")
        assert not v.string.date().test("2023-１2-25")

    def test_time(self, v: Validator) -> None:
        assert not v.string.time().test("1٠:30")
        assert not v.string.time().test("10:30:00.１２３")

    def test_date_times(self, v: Validator) -> None:
        assert not v.string.date_time.local().test("2023-12-25T1٠:30:00")
        assert not v.string.date_time.global_().test("2023-12-2５T10:30:00Z")
        assert not v.string.date_time.global_(DateTimeOffset.REQUIRED).test(
            "2023-12-25T10:30:00+0٥:00"
        )

    def test_ip(self, v: Validator) -> None:
        assert not v.string.ip(IpVersion.V4).test("1٩2.168.1.1")
        assert not v.string.ip(IpVersion.V4, True).test("1.1.1.1/٣")
        assert not v.string.ip(IpVersion.V6, True).test("2001:db8::/٦٤")


class TestFormatValidatorShape:
    def test_formats_are_regex_validators(self, v: Validator) -> None:
        from valdox.validation import StringRegexValidator

        validator = v.string.ip(IpVersion.V4, True)
        assert isinstance(validator, StringRegexValidator)
        assert validator.pattern.startswith("^")
        assert validator.match("10.0.0.1/8").matched

    def test_format_base_is_abstract(self) -> None:
        from valdox.validation import FormatValidator

        with pytest.raises(TypeError):
            FormatValidator()  # type: ignore[abstract]

    def test_equal_configuration_compares_equal(self, v: Validator) -> None:
        assert v.string.mac("-") == v.string.mac("-")
        assert v.string.mac("-") != v.string.mac(":")
