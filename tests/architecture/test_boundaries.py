from pytest_archon import archrule


def test_core_independence() -> None:
    """
    Core must not import from specifications or any backend.
    It is the foundation every store builds on.
    """
    (
        archrule("core_is_independent")
        .match("fedstore_core*")
        .should_not_import("fedstore_specifications*")
        .should_not_import("fedstore_redis*")
        .should_not_import("redis*")
        .check("fedstore_core")
    )


def test_specifications_layering() -> None:
    """
    Specifications depend on core only; backends translate them,
    never the other way round.
    """
    (
        archrule("specifications_layering")
        .match("fedstore_specifications*")
        .should_not_import("fedstore_redis*")
        .should_not_import("redis*")
        .check("fedstore_specifications")
    )


def test_domain_isolation() -> None:
    """
    Domain layer should be self-contained.
    It must not import from adapters or ports.
    """
    (
        archrule("domain_isolation")
        .match("fedstore_core.domain*")
        .should_not_import("fedstore_core.adapters*")
        .should_not_import("fedstore_core.ports*")
        .check("fedstore_core")
    )


def test_ports_do_not_depend_on_adapters() -> None:
    (
        archrule("ports_isolation")
        .match("fedstore_core.ports*")
        .should_not_import("fedstore_core.adapters*")
        .check("fedstore_core")
    )
