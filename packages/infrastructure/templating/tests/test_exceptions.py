"""Tests for the templating exception hierarchy."""

from cqrs_ddd_templating.exceptions import (
    HandlerResolutionError,
    TemplateNotFoundError,
    TemplatingError,
)


def test_template_not_found_error_carries_context():
    """Test TemplateNotFoundError keeps the requested name and search path."""
    error = TemplateNotFoundError("bar", "/srv/templates/")

    assert isinstance(error, TemplatingError)
    assert error.name == "bar"
    assert error.path == "/srv/templates/"
    assert str(error) == 'Missing template "bar" in "/srv/templates/".'


def test_handler_resolution_error_carries_context():
    """Test HandlerResolutionError keeps the extension and file."""
    error = HandlerResolutionError("unknown", "/srv/templates/baz.unknown")

    assert isinstance(error, TemplatingError)
    assert error.extension == "unknown"
    assert error.template_file == "/srv/templates/baz.unknown"
    assert "'unknown'" in str(error)
