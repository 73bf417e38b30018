from pytest_archon import archrule


def test_filtering_is_transport_free() -> None:
    """
    The filter engine works on parsed models only. It must not know about
    HTTP clients, the web framework, or the upstream adapter.
    """
    (
        archrule("filtering_is_transport_free")
        .match("survey_proxy.filtering*")
        .should_not_import("httpx*")
        .should_not_import("fastapi*")
        .should_not_import("starlette*")
        .should_not_import("survey_proxy.upstream*")
        .should_not_import("survey_proxy.contrib*")
        .should_not_import("survey_proxy.service")
        .check("survey_proxy.filtering", only_direct_imports=True)
    )


def test_upstream_layering() -> None:
    """
    The upstream adapter speaks httpx but never the web framework, and does
    not depend on the filter engine.
    """
    (
        archrule("upstream_layering")
        .match("survey_proxy.upstream*")
        .should_not_import("fastapi*")
        .should_not_import("starlette*")
        .should_not_import("survey_proxy.filtering*")
        .should_not_import("survey_proxy.contrib*")
        .check("survey_proxy.upstream", only_direct_imports=True)
    )


def test_models_are_leaf() -> None:
    (
        archrule("models_are_leaf")
        .match("survey_proxy.models")
        .should_not_import("survey_proxy.filtering*")
        .should_not_import("survey_proxy.upstream*")
        .should_not_import("survey_proxy.service")
        .should_not_import("survey_proxy.contrib*")
        .check("survey_proxy", only_direct_imports=True)
    )


def test_service_does_not_depend_on_web_framework() -> None:
    (
        archrule("service_is_framework_free")
        .match("survey_proxy.service")
        .should_not_import("fastapi*")
        .should_not_import("starlette*")
        .should_not_import("survey_proxy.contrib*")
        .check("survey_proxy", only_direct_imports=True)
    )
