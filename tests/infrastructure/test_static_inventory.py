"""Tests for StaticInventory."""

from cronfleet.domain.value_objects.host import Host
from cronfleet.infrastructure.adapters.static_inventory import StaticInventory

ROLE_MAP = {
    "app": ["web1", "deploy@web2:2222"],
    "db": ["db1", "web1"],
    "worker": [],
}


class TestStaticInventory:
    def test_find_servers_for_roles(self):
        inventory = StaticInventory(ROLE_MAP)
        assert inventory.find_servers(["db"]) == [Host(host="db1"), Host(host="web1")]

    def test_find_servers_deduplicates(self):
        inventory = StaticInventory(ROLE_MAP)
        assert inventory.find_servers(["app", "db"]) == [
            Host(host="web1"),
            Host(host="web2", port=2222, user="deploy"),
            Host(host="db1"),
        ]

    def test_find_servers_without_roles_returns_all(self):
        inventory = StaticInventory(ROLE_MAP)
        assert len(inventory.find_servers([])) == 3

    def test_unknown_role(self):
        assert StaticInventory(ROLE_MAP).find_servers(["cache"]) == []

    def test_role_names_for_host(self):
        inventory = StaticInventory(ROLE_MAP)
        assert inventory.role_names_for_host(Host(host="web1")) == ["app", "db"]
        assert inventory.role_names_for_host(Host(host="web2", port=2222, user="deploy")) == ["app"]
        assert inventory.role_names_for_host(Host(host="elsewhere")) == []


class TestInventoryKeyHosts:
    def test_ssh_config_alias_in_role_map(self):
        inventory = StaticInventory({"db": ["db_primary"]})
        assert inventory.find_servers(["db"]) == [Host(host="db_primary")]
