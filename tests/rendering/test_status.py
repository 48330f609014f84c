# topmark:header:start
#
#   project      : FeatureDocs
#   file         : test_status.py
#   file_relpath : tests/rendering/test_status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the Status Renderer (`featuredocs.rendering.status`)."""

from __future__ import annotations

from featuredocs.documents.extractor import extract
from featuredocs.documents.model import FeatureDocument, SubjectStatus, SupportStatus
from featuredocs.rendering.status import (
    UNSPECIFIED,
    StatusBadge,
    badges_for,
    render_badge_html,
    render_badge_text,
    render_status,
)
from tests.conftest import feature_doc


def _document(text: str, *, body_subjects: tuple[str, ...] = ()) -> FeatureDocument:
    return FeatureDocument.from_extracted(
        extract(text), url="/feature/", body_subjects=body_subjects
    )


def test_two_subjects_render_independent_badges() -> None:
    """rust supported and swift pending give two badges, each with its own status."""
    doc = _document(feature_doc("Generics", subjects={"rust": "supported", "swift": "pending"}))

    badges = badges_for(doc)

    assert [(b.subject, b.status) for b in badges] == [
        ("rust", "supported"),
        ("swift", "pending"),
    ]
    assert [b.css_class for b in badges] == ["status-supported", "status-pending"]
    assert not any(b.has_details for b in badges)


def test_details_link_uses_caption() -> None:
    """A details URL renders as a link labelled with the caption."""
    entry = SubjectStatus(
        "swift", SupportStatus.PENDING, details_caption="SE-0361", details_url="https://x/se"
    )
    badge = render_status(entry, subject="swift")

    assert badge == StatusBadge("swift", "pending", "SE-0361", "https://x/se")


def test_details_link_without_caption_is_labelled_details() -> None:
    """Without a caption the link falls back to the generic label."""
    entry = SubjectStatus("rust", SupportStatus.SUPPORTED, details_url="https://x/rfc")
    badge = render_status(entry, subject="rust")

    assert badge.details_label == "details"
    assert badge.details_url == "https://x/rfc"


def test_caption_without_url_has_no_link() -> None:
    """A caption alone does not produce a link."""
    entry = SubjectStatus("rust", SupportStatus.SUPPORTED, details_caption="RFC 2000")
    badge = render_status(entry, subject="rust")

    assert not badge.has_details
    assert badge.details_label is None


def test_absent_entry_is_unspecified() -> None:
    """A subject without an entry renders as the neutral badge."""
    badge = render_status(None, subject="kotlin")

    assert badge.status == UNSPECIFIED
    assert badge.css_class == "status-unspecified"
    assert not badge.is_specified


def test_badges_for_explicit_subjects() -> None:
    """Requested subjects missing from the header render as unspecified."""
    doc = _document(feature_doc("Generics", subjects={"rust": "supported"}))

    badges = badges_for(doc, ["swift", "rust"])

    assert [(b.subject, b.status) for b in badges] == [
        ("swift", UNSPECIFIED),
        ("rust", "supported"),
    ]


def test_badges_for_includes_unlisted_body_subjects() -> None:
    """Body subjects without a header entry are appended as unspecified."""
    doc = _document(
        feature_doc("Generics", subjects={"rust": "supported"}),
        body_subjects=("rust", "swift"),
    )

    assert [(b.subject, b.status) for b in badges_for(doc)] == [
        ("rust", "supported"),
        ("swift", UNSPECIFIED),
    ]


def test_render_badge_html_escapes_values() -> None:
    """Captions and URLs are HTML-escaped."""
    badge = StatusBadge("swift", "pending", "<b>SE</b>", 'https://x/?a=1&b="2"')

    html = str(render_badge_html(badge))

    assert 'class="badge status-pending"' in html
    assert 'data-subject="swift"' in html
    assert "&lt;b&gt;SE&lt;/b&gt;" in html
    assert "a=1&amp;b=&#34;2&#34;" in html
    assert "<b>" not in html


def test_render_badge_text_plain() -> None:
    """Terminal text without color shows subject, status and link."""
    badge = StatusBadge("swift", "pending", "SE-0361", "https://x/se")

    assert render_badge_text(badge, color=False) == "swift: pending (SE-0361 <https://x/se>)"
    assert render_badge_text(StatusBadge("rust", "supported"), color=False) == "rust: supported"


def test_badge_to_dict() -> None:
    """Machine output carries all badge fields."""
    assert StatusBadge("rust", "supported").to_dict() == {
        "subject": "rust",
        "status": "supported",
        "details_label": None,
        "details_url": None,
    }
