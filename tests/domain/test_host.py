"""Tests for Host value object."""

import pytest
from cronfleet.domain.value_objects.host import Host


class TestHost:
    def test_default_values(self):
        host = Host(host="example.com")
        assert host.user is None
        assert host.port is None

    def test_custom_values(self):
        host = Host(host="10.0.0.1", user="deploy", port=2222)
        assert host.host == "10.0.0.1"
        assert host.user == "deploy"
        assert host.port == 2222

    def test_str(self):
        assert str(Host(host="web1.example.com", user="admin", port=22)) == "admin@web1.example.com:22"
        assert str(Host(host="web1.example.com")) == "web1.example.com"

    def test_str_ipv6(self):
        assert str(Host(host="::1", port=2222)) == "[::1]:2222"

    def test_frozen(self):
        host = Host(host="example.com")
        with pytest.raises(AttributeError):
            host.host = "other.com"

    def test_hashable_and_equal(self):
        a = Host(host="example.com", port=22)
        b = Host(host="example.com", port=22)
        assert a == b
        assert {a: ["app"]}[b] == ["app"]

    def test_port_distinguishes_hosts(self):
        assert Host(host="example.com", port=22) != Host(host="example.com", port=1022)


class TestHostValidation:
    def test_empty_host_rejected(self):
        with pytest.raises(ValueError, match="Invalid hostname"):
            Host(host="")

    def test_empty_user_rejected(self):
        with pytest.raises(ValueError, match="user cannot be empty"):
            Host(host="example.com", user="")

    def test_port_out_of_range(self):
        with pytest.raises(ValueError, match="Port must be"):
            Host(host="example.com", port=0)
        with pytest.raises(ValueError, match="Port must be"):
            Host(host="example.com", port=70000)

    def test_bad_ipv4_rejected(self):
        with pytest.raises(ValueError, match="Invalid hostname"):
            Host(host="300.1.1.1")


class TestHostParse:
    def test_plain(self):
        assert Host.parse("web1.example.com") == Host(host="web1.example.com")

    def test_user_host_port(self):
        assert Host.parse("deploy@web1:1022") == Host(host="web1", port=1022, user="deploy")

    def test_surrounding_whitespace(self):
        assert Host.parse("  db1  ") == Host(host="db1")

    def test_bare_ipv6(self):
        assert Host.parse("::1") == Host(host="::1")

    def test_bracketed_ipv6_with_port(self):
        assert Host.parse("deploy@[fe80::1]:2222") == Host(host="fe80::1", port=2222, user="deploy")

    def test_unterminated_bracket(self):
        with pytest.raises(ValueError, match="Unterminated"):
            Host.parse("[::1")


class TestInventoryKeys:
    def test_underscore_key(self):
        assert Host.parse("db_primary") == Host(host="db_primary")

    def test_underscore_key_with_user_and_port(self):
        assert Host.parse("deploy@app_server_1.internal:2222") == Host(
            host="app_server_1.internal", port=2222, user="deploy"
        )

    def test_whitespace_still_rejected(self):
        with pytest.raises(ValueError, match="Invalid hostname"):
            Host(host="db primary")
