"""Tests for declarative factory configuration."""

import pytest
from pydantic import ValidationError

from cqrs_ddd_templating.config import HandlerConfig, TemplatingConfig
from cqrs_ddd_templating.engines.string import StringFormatTemplate
from cqrs_ddd_templating.factory import TemplateFactory


def test_build_factory_with_defaults(template_dir) -> None:
    config = TemplatingConfig(path=str(template_dir))

    factory = config.build_factory()

    assert isinstance(factory, TemplateFactory)
    assert factory.get_path() == f"{template_dir}/"
    assert "txt" in factory.handlers
    assert factory.render("foo", {"whom": "bar"}) == "Hallo, bar!"


def test_handler_renderer_from_import_string(template_dir) -> None:
    config = TemplatingConfig.from_mapping(
        {
            "path": str(template_dir),
            "include_default_handlers": False,
            "handlers": {
                ".unknown": {
                    "renderer": "cqrs_ddd_templating.engines.string:StringFormatTemplate",
                    "options": {"keep_trailing_newline": True},
                },
            },
        }
    )

    factory = config.build_factory()

    assert list(factory.handlers) == ["unknown"]
    assert factory.handlers["unknown"].renderer is StringFormatTemplate
    assert factory.render("baz") == "no handler for this one"


def test_handler_renderer_from_dotted_path() -> None:
    handler = HandlerConfig(renderer="cqrs_ddd_templating.engines.string.StringFormatTemplate")
    assert handler.renderer is StringFormatTemplate


def test_configured_handlers_follow_defaults(template_dir) -> None:
    config = TemplatingConfig(
        path=str(template_dir),
        handlers={"tpl": HandlerConfig(renderer=StringFormatTemplate)},
    )

    assert list(config.build_factory().handlers)[-1] == "tpl"


@pytest.mark.parametrize(
    "renderer",
    [
        "not_a_real_module:Renderer",
        "cqrs_ddd_templating.engines.string:Missing",
        "cqrs_ddd_templating.factory:TemplateFactory",
        "nodots",
    ],
)
def test_invalid_renderer_rejected(renderer) -> None:
    with pytest.raises(ValidationError):
        HandlerConfig(renderer=renderer)


@pytest.mark.parametrize("extension", ["", ".", "tar.gz", "a/b"])
def test_invalid_extension_rejected(extension) -> None:
    with pytest.raises(ValidationError):
        TemplatingConfig(
            path="/templates",
            handlers={extension: {"renderer": StringFormatTemplate}},
        )


def test_config_is_immutable() -> None:
    config = TemplatingConfig(path="/templates")

    with pytest.raises(ValidationError):
        config.path = "/elsewhere"
