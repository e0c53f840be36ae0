import pytest

import assistgen as ag


class FakeHead:
    def __init__(self, existing: tuple[str, ...] = ()) -> None:
        self.existing = set(existing)
        self.nodes: list[ag.ResourceNode] = []

    def has_resource(self, kind: str, src: str) -> bool:
        return src in self.existing

    def append(self, node: ag.ResourceNode) -> None:
        self.existing.add(node.src)
        self.nodes.append(node)


def test_loads_scripts_and_styles() -> None:
    head = FakeHead()
    manager = ag.ExternalResourcesManager(head)

    nodes = manager.load_external_resources(
        "tau",
        [
            "lib/tau.js",
            {"src": "lib/tau.css", "attributes": {"media": "screen"}},
            "lib/readme.txt",
        ],
    )

    assert [node.tag for node in nodes] == ["script", "link"]
    assert nodes[0].attributes == {"type": "text/javascript", "src": "lib/tau.js"}
    assert nodes[1].attributes == {
        "type": "text/css",
        "rel": "stylesheet",
        "href": "lib/tau.css",
        "media": "screen",
    }
    assert head.nodes == nodes
    assert manager.pending("tau") == nodes


def test_existing_resources_are_skipped() -> None:
    head = FakeHead(existing=("lib/tau.js",))
    manager = ag.ExternalResourcesManager(head)

    assert manager.load_external_resources("tau", ["lib/tau.js"]) == []
    assert manager.pending("tau") == []


def test_event_fires_after_last_resource_loads() -> None:
    emitter = ag.EventEmitter()
    loaded = []
    emitter.on(ag.EVENTS.EXTERNAL_RESOURCES_LOADED, loaded.append)
    manager = ag.ExternalResourcesManager(FakeHead(), emitter)
    script, style = manager.load_external_resources("tau", ["tau.js", "tau.css"])

    manager.resource_loaded("tau", style)
    assert loaded == []

    manager.resource_loaded("tau", script)
    assert loaded == [{"name": "tau"}]
    assert manager.pending("tau") == []


def test_unknown_resource_load_raises() -> None:
    manager = ag.ExternalResourcesManager(FakeHead())
    (script,) = manager.load_external_resources("tau", ["tau.js"])

    with pytest.raises(KeyError):
        manager.resource_loaded("other", script)
    with pytest.raises(KeyError):
        manager.resource_loaded("tau", ag.ResourceNode("script", {"src": "x.js"}))
