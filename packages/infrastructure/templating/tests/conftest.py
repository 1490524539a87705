"""Test configuration for cqrs-ddd-templating."""

import pytest

from cqrs_ddd_templating.factory import TemplateFactory

TEMPLATES = {
    "foo.txt": "Hallo, {whom}!\n",
    "layout.txt": "<body>{content_for_layout}</body>\n",
    "titled_layout.txt": "<title>{title}</title>{content_for_layout}",
    "entry.txt": "<li>{entry}</li>\n",
    "spacer.txt": ",",
    "labelled_entry.txt": "{label}:{labelled_entry}",
    "labelled_spacer.txt": "{sep}",
    "baz.unknown": "no handler for this one",
    "partials/item.txt": "[{item}]",
    "user.profile.txt": "profile of {whom}",
}


@pytest.fixture
def template_dir(tmp_path):
    """Directory tree holding the string-format fixture templates."""
    for name, body in TEMPLATES.items():
        target = tmp_path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(body, encoding="utf-8")
    return tmp_path


@pytest.fixture
def factory(template_dir):
    """Factory rooted at the fixture template directory."""
    return TemplateFactory(str(template_dir))
