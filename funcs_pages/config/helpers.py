"""Utility helpers shared by the funcs_pages configuration loader."""

from __future__ import annotations

import typing as typ

from funcs_pages._constants import FOLDER_CLICK_BEHAVIORS, FOLDER_DEFAULT_STATES

from .models import ExplorerConfig, FooterConfig, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_mapping(value: object, section: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            msg = f"Section '{section}' must be a mapping."
            raise SiteConfigError(msg)


def _choice(value: object | None, allowed: tuple[str, ...], *, field: str) -> str:
    """Validate ``value`` against ``allowed``, defaulting to the first choice."""
    text = _optional_str(value)
    if text is None:
        return allowed[0]
    if text not in allowed:
        options = ", ".join(allowed)
        msg = f"Unknown {field} '{text}'. Expected one of: {options}"
        raise SiteConfigError(msg)
    return text


def _flag(value: object, *, field: str) -> bool:
    """Return ``value`` when it is a YAML boolean, rejecting strings and numbers."""
    if not isinstance(value, bool):
        msg = f"{field} must be a boolean, got {value!r}"
        raise SiteConfigError(msg)
    return value


def _build_footer_config(payload: typ.Mapping[str, typ.Any]) -> FooterConfig:
    """Build a FooterConfig from the ``footer`` section of the YAML document."""
    if "links" not in payload:
        return FooterConfig()
    links_raw = _require_mapping(payload["links"], "footer.links")
    links: dict[str, str] = {}
    for label, href in links_raw.items():
        target = _optional_str(href)
        if target is None:
            msg = f"Footer link '{label}' is missing a target URL."
            raise SiteConfigError(msg)
        links[str(label)] = target
    return FooterConfig(links=links)


def _build_explorer_config(payload: typ.Mapping[str, typ.Any]) -> ExplorerConfig:
    """Build an ExplorerConfig, validating the folder behaviour options."""
    base = ExplorerConfig()
    return ExplorerConfig(
        title=_optional_str(payload.get("title")) or base.title,
        folder_click_behavior=_choice(
            payload.get("folder_click_behavior"),
            FOLDER_CLICK_BEHAVIORS,
            field="folder_click_behavior",
        ),
        folder_default_state=_choice(
            payload.get("folder_default_state"),
            FOLDER_DEFAULT_STATES,
            field="folder_default_state",
        ),
        use_saved_state=_flag(
            payload.get("use_saved_state", base.use_saved_state),
            field="use_saved_state",
        ),
    )


__all__ = [
    "_build_explorer_config",
    "_build_footer_config",
    "_choice",
    "_flag",
    "_optional_str",
    "_require_mapping",
]
