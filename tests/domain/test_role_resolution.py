"""Tests for role filtering and resolution."""

from cronfleet.domain.services.role_resolution import filter_roles, resolve_server_roles


def _lookup(table):
    return lambda host: table[host]


class TestFilterRoles:
    def test_intersection(self):
        assert filter_roles(["role1", "role3"], ["role1", "role2"]) == ["role1"]

    def test_requested_order_wins(self):
        assert filter_roles(["role3", "role1"], ["role1", "role2", "role3"]) == ["role1", "role3"]

    def test_no_overlap(self):
        assert filter_roles(["role3"], ["role1"]) == []

    def test_duplicate_requests_collapse(self):
        assert filter_roles(["app"], ["app", "app"]) == ["app"]


class TestResolveServerRoles:
    def test_map_of_servers_to_roles(self):
        lookup = _lookup({"foo": ["role1"], "bar": ["role2"]})
        result = resolve_server_roles(["role1", "role2"], ["foo", "bar"], lookup)
        assert result == {"foo": ["role1"], "bar": ["role2"]}

    def test_excludes_non_requested_roles(self):
        lookup = _lookup({"foo": ["role1", "role3"], "bar": ["role2"]})
        result = resolve_server_roles(["role1", "role2"], ["foo", "bar"], lookup)
        assert result == {"foo": ["role1"], "bar": ["role2"]}

    def test_includes_all_requested_roles_for_multi_role_servers(self):
        lookup = _lookup({"foo": ["role1", "role3"], "bar": ["role2"]})
        result = resolve_server_roles(["role1", "role2", "role3"], ["foo", "bar"], lookup)
        assert result == {"foo": ["role1", "role3"], "bar": ["role2"]}

    def test_drops_servers_without_matching_role(self):
        lookup = _lookup({"foo": ["role1"], "bar": ["role9"]})
        result = resolve_server_roles(["role1"], ["foo", "bar"], lookup)
        assert result == {"foo": ["role1"]}
        assert "bar" not in result

    def test_empty_request_keeps_every_host_unfiltered(self):
        lookup = _lookup({"foo": ["role1", "role3"], "bar": []})
        result = resolve_server_roles([], ["foo", "bar"], lookup)
        assert result == {"foo": ["role1", "role3"], "bar": []}

    def test_deterministic(self):
        lookup = _lookup({"foo": ["role2", "role1"]})
        first = resolve_server_roles(["role1", "role2"], ["foo"], lookup)
        second = resolve_server_roles(["role1", "role2"], ["foo"], lookup)
        assert first == second == {"foo": ["role1", "role2"]}

    def test_no_hosts(self):
        assert resolve_server_roles(["role1"], [], _lookup({})) == {}
