from chainsmith.mutations import add_boot_nodes


def test_boot_nodes_are_deduplicated(spec):
    result = add_boot_nodes(spec, ["a", "a", "b"])
    assert result.changed
    assert sorted(spec["bootNodes"]) == ["a", "b"]


def test_empty_input_clears_boot_nodes(spec):
    result = add_boot_nodes(spec, [])
    assert spec["bootNodes"] == []
    assert result.messages == ["Local Testnet Clear Boot Nodes"]


def test_boot_nodes_without_runtime():
    spec = {"name": "raw", "genesis": {"raw": {}}}
    add_boot_nodes(spec, ["/dns/a"])
    assert spec["bootNodes"] == ["/dns/a"]
