"""
Theme Tokens and Color Palette

Derives the complete design-token set from a partial override and serializes
it twice:
    - a CSS custom property block (:root { --brand-primary: ...; ... })
    - a Tailwind CDN configuration block (tailwind.config = {...})

Token groups: brand, surface, text, border, status, radius. Overrides are
merged one level deep: each group is filled key-by-key from the defaults, so
every slot always has a value. brand.gradient is a single slot and is
replaced as a whole.

Usage:
    from lumui.framework.theme import create_theme, default_theme

    theme = create_theme({"brand": {"primary": "#2563EB"}})
    theme.config.brand["primary"]   # '#2563EB'
    theme.config.surface[0]         # '#0A0A0F' (default)
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from lumui.core.logging_config import get_logger
from lumui.security import ValidationError

logger = get_logger(__name__)

THEME_GROUPS = ("brand", "surface", "text", "border", "status", "radius")

# Slots every group must carry; brand.gradient is optional
REQUIRED_SLOTS: Mapping[str, tuple[Any, ...]] = MappingProxyType(
    {
        "brand": ("primary", "secondary", "accent"),
        "surface": (0, 1, 2, 3),
        "text": ("primary", "secondary", "muted", "subtle"),
        "border": ("default", "hover", "focus"),
        "status": ("success", "warning", "error", "info"),
        "radius": ("sm", "md", "lg", "full"),
    }
)
OPTIONAL_SLOTS: Mapping[str, tuple[str, ...]] = MappingProxyType({"brand": ("gradient",)})

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    return value


def _check_gradient(gradient: Any) -> None:
    if not isinstance(gradient, Mapping):
        raise ValueError(f"brand.gradient must be a mapping with 'from' and 'to', got {gradient!r}")
    missing = [stop for stop in ("from", "to") if stop not in gradient]
    if missing:
        raise ValueError(f"brand.gradient is missing stops: {missing}")
    unknown = [stop for stop in gradient if stop not in ("from", "via", "to")]
    if unknown:
        raise ValueError(f"brand.gradient has unknown stops: {unknown}")


@dataclass(frozen=True)
class ThemeConfig:
    """
    Complete, read-only token configuration.

    Each group is a read-only mapping of slot name to CSS value. Surface
    slots are keyed 0-3 (base background, cards, elevated, hover).

    Attributes:
        brand: primary, secondary, accent and an optional gradient {from, via?, to}
        surface: 0, 1, 2, 3
        text: primary, secondary, muted, subtle
        border: default, hover, focus
        status: success, warning, error, info
        radius: sm, md, lg, full

    Raises:
        ValueError: If a required slot is missing or an unknown slot is present,
            or brand.gradient is not a {from, via?, to} mapping
    """

    brand: Mapping[str, Any]
    surface: Mapping[int, str]
    text: Mapping[str, str]
    border: Mapping[str, str]
    status: Mapping[str, str]
    radius: Mapping[str, str]

    def __post_init__(self) -> None:
        for group in THEME_GROUPS:
            slots = getattr(self, group)
            missing = [slot for slot in REQUIRED_SLOTS[group] if slot not in slots]
            if missing:
                raise ValueError(f"Theme group '{group}' is missing slots: {missing}")
            allowed = set(REQUIRED_SLOTS[group]) | set(OPTIONAL_SLOTS.get(group, ()))
            unknown = [slot for slot in slots if slot not in allowed]
            if unknown:
                raise ValueError(f"Theme group '{group}' has unknown slots: {unknown}")
            if group == "brand" and "gradient" in slots:
                _check_gradient(slots["gradient"])
            object.__setattr__(self, group, _freeze(slots))

    def __getitem__(self, group: str) -> Mapping[Any, Any]:
        if group not in THEME_GROUPS:
            raise KeyError(group)
        return getattr(self, group)

    def to_dict(self) -> dict[str, dict[Any, Any]]:
        """Return a plain, mutable deep copy of the configuration."""
        return {group: _thaw(getattr(self, group)) for group in THEME_GROUPS}


@dataclass(frozen=True)
class Theme:
    """
    Resolved theme: configuration plus its two serialized artifacts.

    Attributes:
        config: Complete ThemeConfig
        css_variables: :root custom property block
        tailwind_config: tailwind.config assignment for the Tailwind CDN runtime
    """

    config: ThemeConfig
    css_variables: str
    tailwind_config: str


# Default dark theme with a warm-to-violet gradient
DEFAULT_THEME_CONFIG = ThemeConfig(
    brand={
        "primary": "#FF4D8D",
        "secondary": "#8B5CF6",
        "accent": "#FF8C00",
        "gradient": {"from": "#FF8C00", "via": "#FF4D8D", "to": "#8B5CF6"},
    },
    surface={0: "#0A0A0F", 1: "#12121A", 2: "#1A1A24", 3: "#24242F"},
    text={"primary": "#FFFFFF", "secondary": "#D4D4D8", "muted": "#A1A1AA", "subtle": "#71717A"},
    border={"default": "rgba(255, 255, 255, 0.05)", "hover": "rgba(255, 77, 141, 0.2)", "focus": "#FF4D8D"},
    status={"success": "#10B981", "warning": "#F59E0B", "error": "#EF4444", "info": "#06B6D4"},
    radius={"sm": "6px", "md": "10px", "lg": "16px", "full": "9999px"},
)


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    """
    Blend a #RRGGBB color with an alpha channel.

    Args:
        hex_color: 6-digit hex color with leading '#'
        alpha: Opacity in [0, 1]

    Returns:
        CSS rgba() string

    Raises:
        ValidationError: If hex_color is not #RRGGBB (3-digit, named and rgb() colors are not supported)

    Example:
        >>> hex_to_rgba("#FF4D8D", 0.15)
        'rgba(255, 77, 141, 0.15)'
    """
    if not isinstance(hex_color, str) or not HEX_COLOR.match(hex_color):
        raise ValidationError(f"Expected a #RRGGBB color, got {hex_color!r}")

    r = int(hex_color[1:3], 16)
    g = int(hex_color[3:5], 16)
    b = int(hex_color[5:7], 16)
    return f"rgba({r}, {g}, {b}, {alpha:g})"


def _merge_group(group: str, defaults: Mapping[Any, Any], override: Mapping[Any, Any] | None) -> dict[Any, Any]:
    merged = dict(defaults)
    if override:
        for slot, value in override.items():
            # Surface slots may arrive as "0".."3" from JSON or env sources
            key = int(slot) if group == "surface" else slot
            merged[key] = value
    return merged


def merge_theme_config(overrides: Mapping[str, Any] | ThemeConfig | None = None) -> ThemeConfig:
    """
    Merge a partial override over DEFAULT_THEME_CONFIG.

    Args:
        overrides: None, a partial {group: {slot: value}} mapping, or a ThemeConfig

    Returns:
        Complete ThemeConfig

    Raises:
        ValueError: If overrides names an unknown group or slot
    """
    if overrides is None:
        overrides = {}
    elif isinstance(overrides, ThemeConfig):
        overrides = overrides.to_dict()

    unknown = [group for group in overrides if group not in THEME_GROUPS]
    if unknown:
        raise ValueError(f"Unknown theme groups: {unknown}")

    return ThemeConfig(
        **{group: _merge_group(group, DEFAULT_THEME_CONFIG[group], overrides.get(group)) for group in THEME_GROUPS}
    )


def brand_gradient(config: ThemeConfig) -> str:
    """
    Build the --gradient-brand value.

    Three stops from brand.gradient (via falls back to brand.primary), or a
    two-stop primary -> secondary gradient when no gradient is configured.
    """
    gradient = config.brand.get("gradient")
    if gradient:
        via = gradient.get("via") or config.brand["primary"]
        return f"linear-gradient(135deg, {gradient['from']} 0%, {via} 50%, {gradient['to']} 100%)"
    return f"linear-gradient(135deg, {config.brand['primary']} 0%, {config.brand['secondary']} 100%)"


def generate_css_variables(config: ThemeConfig) -> str:
    """
    Render the :root custom property block for a theme configuration.

    Emits one variable per slot plus the derived gradients and glow shadows.
    """
    brand = config.brand
    surface = config.surface
    text = config.text
    border = config.border
    status = config.status
    radius = config.radius

    subtle = (
        f"linear-gradient(135deg, {hex_to_rgba(brand['accent'], 0.1)} 0%, "
        f"{hex_to_rgba(brand['secondary'], 0.1)} 100%)"
    )
    glow = f"0 0 20px {hex_to_rgba(brand['primary'], 0.15)}, 0 0 40px {hex_to_rgba(brand['secondary'], 0.1)}"
    glow_strong = f"0 0 30px {hex_to_rgba(brand['accent'], 0.2)}, 0 0 60px {hex_to_rgba(brand['secondary'], 0.15)}"

    return f"""
  :root {{
    /* Brand colors */
    --brand-primary: {brand['primary']};
    --brand-secondary: {brand['secondary']};
    --brand-accent: {brand['accent']};

    /* Surface colors */
    --surface-0: {surface[0]};
    --surface-1: {surface[1]};
    --surface-2: {surface[2]};
    --surface-3: {surface[3]};

    /* Text colors */
    --text-primary: {text['primary']};
    --text-secondary: {text['secondary']};
    --text-muted: {text['muted']};
    --text-subtle: {text['subtle']};

    /* Border colors */
    --border-default: {border['default']};
    --border-hover: {border['hover']};
    --border-focus: {border['focus']};

    /* Status colors */
    --status-success: {status['success']};
    --status-warning: {status['warning']};
    --status-error: {status['error']};
    --status-info: {status['info']};

    /* Radius */
    --radius-sm: {radius['sm']};
    --radius-md: {radius['md']};
    --radius-lg: {radius['lg']};
    --radius-full: {radius['full']};

    /* Gradients */
    --gradient-brand: {brand_gradient(config)};
    --gradient-subtle: {subtle};

    /* Shadows */
    --shadow-glow: {glow};
    --shadow-glow-strong: {glow_strong};
  }}
"""


def generate_tailwind_config(config: ThemeConfig) -> str:
    """
    Render the Tailwind CDN configuration exposing brand/surface colors
    and the derived gradient and shadow variables as utility tokens.
    """
    brand = config.brand
    surface = config.surface
    return f"""
  tailwind.config = {{
    theme: {{
      extend: {{
        colors: {{
          brand: {{
            primary: '{brand['primary']}',
            secondary: '{brand['secondary']}',
            accent: '{brand['accent']}',
          }},
          surface: {{
            0: '{surface[0]}',
            1: '{surface[1]}',
            2: '{surface[2]}',
            3: '{surface[3]}',
          }},
        }},
        backgroundImage: {{
          'brand-gradient': 'var(--gradient-brand)',
          'brand-gradient-subtle': 'var(--gradient-subtle)',
        }},
        boxShadow: {{
          'brand-glow': 'var(--shadow-glow)',
          'brand-glow-strong': 'var(--shadow-glow-strong)',
        }},
      }}
    }}
  }}
"""


def create_theme(overrides: Mapping[str, Any] | ThemeConfig | None = None) -> Theme:
    """
    Create a theme from a partial configuration.

    Each call returns an independent Theme; nothing is cached or shared.

    Args:
        overrides: None, a partial {group: {slot: value}} mapping, or a complete ThemeConfig

    Returns:
        Theme with the merged config and both serialized artifacts

    Raises:
        ValueError: If overrides names an unknown group or slot
        ValidationError: If a brand color is not #RRGGBB

    Example:
        theme = create_theme({"brand": {"primary": "#000000"}})
        assert theme.config.brand["secondary"] == "#8B5CF6"
    """
    config = merge_theme_config(overrides)
    groups = list(THEME_GROUPS) if isinstance(overrides, ThemeConfig) else sorted(overrides or {})
    logger.debug("Theme created", extra={"overridden_groups": groups})
    return Theme(
        config=config,
        css_variables=generate_css_variables(config),
        tailwind_config=generate_tailwind_config(config),
    )


def get_theme_variables(theme: Theme | None = None) -> str:
    """
    Returns the CSS custom properties for a theme (default theme when omitted).
    """
    return (theme or default_theme).css_variables


# Pre-computed default theme; module-level, read-only
default_theme: Theme = create_theme()
CSS_VARIABLES: str = default_theme.css_variables
TAILWIND_CONFIG: str = default_theme.tailwind_config

# Gradient presets using CSS variables (Tailwind arbitrary values)
GRADIENTS: Mapping[str, str] = MappingProxyType(
    {
        "brand": "from-[var(--brand-accent)] via-[var(--brand-primary)] to-[var(--brand-secondary)]",
        "brandSubtle": "from-[var(--brand-accent)]/10 via-[var(--brand-primary)]/10 to-[var(--brand-secondary)]/10",
        "dark": "from-[var(--surface-0)] to-[var(--surface-1)]",
        "surface": "from-[var(--surface-1)]/50 to-[var(--surface-2)]/50",
        "glow": "from-[var(--brand-primary)]/10 via-transparent to-transparent",
    }
)

# Glass morphism utility classes
GLASS: Mapping[str, str] = MappingProxyType(
    {
        "base": "bg-[var(--surface-1)]/70 backdrop-blur-xl border border-[var(--border-default)]",
        "hover": "hover:border-[var(--border-hover)] hover:shadow-[var(--shadow-glow)]",
    }
)

# Common effect classes
EFFECTS: Mapping[str, str] = MappingProxyType(
    {
        "glow": "shadow-[var(--shadow-glow)]",
        "glowStrong": "shadow-[var(--shadow-glow-strong)]",
        "gradientText": "bg-[var(--gradient-brand)] bg-clip-text text-transparent",
        "gradientBorder": (
            "border border-transparent bg-gradient-to-r from-[var(--brand-accent)] "
            "via-[var(--brand-primary)] to-[var(--brand-secondary)]"
        ),
    }
)


def get_token_docs() -> dict[str, dict[str, str]]:
    """
    Returns documentation for the token groups.
    Used by the showcase generator's token reference.
    """
    return {
        "brand": {
            "primary": "Main brand color (buttons, links, focus rings)",
            "secondary": "Second gradient stop and glow tint",
            "accent": "Highlight color and first gradient stop",
            "gradient": "Optional {from, via, to} stops for --gradient-brand",
        },
        "surface": {
            "0": "Page background",
            "1": "Cards and panels",
            "2": "Elevated elements",
            "3": "Hover states and chart tracks",
        },
        "text": {
            "primary": "Headings and values",
            "secondary": "Body text",
            "muted": "Labels",
            "subtle": "Captions and placeholders",
        },
        "border": {"default": "Resting borders", "hover": "Hovered borders", "focus": "Focus rings"},
        "status": {
            "success": "Healthy, online, completed",
            "warning": "Pending, degraded",
            "error": "Failed, offline",
            "info": "Informational",
        },
        "radius": {"sm": "Small controls", "md": "Cards and buttons", "lg": "Panels", "full": "Pills and avatars"},
    }
