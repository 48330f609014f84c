# topmark:header:start
#
#   project      : FeatureDocs
#   file         : status.py
#   file_relpath : src/featuredocs/rendering/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status Renderer: turn a subject's status entry into a display badge.

A badge shows the status value and, when the entry has a details URL, a link
labelled with the entry's caption (or the generic label ``details``). A
subject without an entry renders as the neutral ``unspecified`` badge.

Three presentations share the same `StatusBadge` value:
    * HTML (`render_badge_html`), used by the page templates;
    * terminal text (`render_badge_text`), colored with `yachalk`;
    * plain data (`StatusBadge.to_dict`), used by machine output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from markupsafe import Markup
from yachalk import chalk

from featuredocs.documents.model import SupportStatus

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from featuredocs.documents.model import FeatureDocument, SubjectStatus

UNSPECIFIED: Final[str] = "unspecified"
DEFAULT_DETAILS_LABEL: Final[str] = "details"

_STATUS_COLORS: Final[dict[str, Callable[[str], str]]] = {
    SupportStatus.SUPPORTED.value: chalk.green,
    SupportStatus.PENDING.value: chalk.yellow,
    SupportStatus.UNAVAILABLE.value: chalk.red,
    UNSPECIFIED: chalk.gray,
}


@dataclass(frozen=True, slots=True)
class StatusBadge:
    """Display data for one subject of one document.

    Attributes:
        subject (str): The subject identifier.
        status (str): The `SupportStatus` value, or ``"unspecified"``.
        details_label (str | None): Link label; set only when ``details_url`` is.
        details_url (str | None): Link target.
    """

    subject: str
    status: str
    details_label: str | None = None
    details_url: str | None = None

    @property
    def css_class(self) -> str:
        """CSS class selecting the badge color (e.g. ``status-supported``)."""
        return f"status-{self.status}"

    @property
    def is_specified(self) -> bool:
        """Return True if the badge reflects a declared status."""
        return self.status != UNSPECIFIED

    @property
    def has_details(self) -> bool:
        """Return True if the badge carries a details link."""
        return self.details_url is not None

    def to_dict(self) -> dict[str, str | None]:
        """Return a JSON-friendly mapping of the badge."""
        return {
            "subject": self.subject,
            "status": self.status,
            "details_label": self.details_label,
            "details_url": self.details_url,
        }


def render_status(entry: SubjectStatus | None, *, subject: str) -> StatusBadge:
    """Build the badge for ``subject`` from its status entry.

    Args:
        entry (SubjectStatus | None): The subject's entry, or ``None`` when the
            document does not declare one.
        subject (str): The subject identifier (used when ``entry`` is None).

    Returns:
        StatusBadge: The badge to display.
    """
    if entry is None:
        return StatusBadge(subject=subject, status=UNSPECIFIED)
    if entry.details_url:
        return StatusBadge(
            subject=entry.subject,
            status=entry.status.value,
            details_label=entry.details_caption or DEFAULT_DETAILS_LABEL,
            details_url=entry.details_url,
        )
    return StatusBadge(subject=entry.subject, status=entry.status.value)


def badges_for(
    document: FeatureDocument,
    subjects: Iterable[str] | None = None,
) -> list[StatusBadge]:
    """Return one badge per subject for ``document``.

    Args:
        document (FeatureDocument): The document to render.
        subjects (Iterable[str] | None): Subjects to show, in order. Defaults to
            the document's declared subjects followed by its unlisted body subjects.

    Returns:
        list[StatusBadge]: One badge per subject, each reflecting only its own entry.
    """
    if subjects is None:
        unlisted = [s for s in document.body_subjects if s not in document.subjects]
        subjects = [*document.subjects, *unlisted]
    return [render_status(document.status_for(s), subject=s) for s in subjects]


def subject_label(subject: str) -> str:
    """Return the display form of a subject identifier (``rust`` → ``Rust``)."""
    return subject[:1].upper() + subject[1:]


def render_badge_html(badge: StatusBadge) -> Markup:
    """Render a badge as an HTML fragment (all values escaped)."""
    parts: list[Markup] = [
        Markup('<span class="badge-subject">{}</span>').format(subject_label(badge.subject)),
        Markup('<span class="badge-status">{}</span>').format(badge.status),
    ]
    if badge.details_url is not None:
        parts.append(
            Markup('<a class="badge-details" href="{}">{}</a>').format(
                badge.details_url, badge.details_label
            )
        )
    return Markup('<span class="badge {}" data-subject="{}">{}</span>').format(
        badge.css_class, badge.subject, Markup(" ").join(parts)
    )


def render_badge_text(badge: StatusBadge, *, color: bool = True) -> str:
    """Render a badge for the terminal.

    Args:
        badge (StatusBadge): The badge to render.
        color (bool): Apply the status color.

    Returns:
        str: E.g. ``rust: supported`` or ``swift: pending (SE-0361 <https://...>)``.
    """
    status: str = badge.status
    if color:
        status = _STATUS_COLORS.get(badge.status, chalk.gray)(status)
    text: str = f"{badge.subject}: {status}"
    if badge.details_url is not None:
        text += f" ({badge.details_label} <{badge.details_url}>)"
    return text
