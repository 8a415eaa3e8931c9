"""
Core UI components

Buttons, cards, alerts, badges, inputs and small widgets rendered from the
Jinja2 templates in lumui/templates/components. Text arguments are
escaped by the template engine; `children` fragments are inserted as-is.
"""

from lumui.domain.variants import (
    AlertType,
    BadgeColor,
    ButtonVariant,
    IconPosition,
    Presence,
    Size,
    StatusColor,
)
from lumui.framework.icons import icon as render_icon
from lumui.framework.icons import icons
from lumui.template_engine import mark_safe, render_template

BUTTON_BASE_CLASSES = (
    "inline-flex items-center justify-center font-medium rounded-md transition-all duration-200 "
    "focus:outline-none focus:ring-2 focus:ring-offset-2 focus:ring-offset-[var(--surface-0)]"
)

BUTTON_VARIANT_CLASSES = {
    ButtonVariant.PRIMARY: "bg-[var(--gradient-brand)] text-white hover:brightness-110 "
    "focus:ring-[var(--brand-primary)] shadow-[var(--shadow-glow)]",
    ButtonVariant.SECONDARY: "bg-[var(--surface-2)] text-white hover:bg-[var(--surface-3)] "
    "focus:ring-[var(--brand-primary)]/50 border border-[var(--border-default)] hover:border-[var(--border-hover)]",
    ButtonVariant.GHOST: "text-[var(--text-secondary)] hover:text-white hover:bg-[var(--surface-2)] "
    "focus:ring-[var(--brand-primary)]/50",
    ButtonVariant.DANGER: "bg-[var(--status-error)] text-white hover:brightness-110 focus:ring-[var(--status-error)]",
    ButtonVariant.SUCCESS: "bg-[var(--status-success)] text-white hover:brightness-110 "
    "focus:ring-[var(--status-success)]",
}

BUTTON_SIZE_CLASSES = {
    Size.SM: "px-3 py-1.5 text-sm gap-1.5",
    Size.MD: "px-4 py-2.5 text-sm gap-2",
    Size.LG: "px-6 py-3 text-base gap-2.5",
}

# Translucent fill + colored text, shared by card status pills and badges
TINTED_CLASSES = {
    "success": "bg-[var(--status-success)]/20 text-[var(--status-success)]",
    "warning": "bg-[var(--status-warning)]/20 text-[var(--status-warning)]",
    "error": "bg-[var(--status-error)]/20 text-[var(--status-error)]",
    "info": "bg-[var(--status-info)]/20 text-[var(--status-info)]",
    "default": "bg-[var(--surface-3)] text-[var(--text-secondary)]",
    "brand": "bg-[var(--gradient-brand)]/20 text-[var(--brand-primary)]",
}


def _join_classes(*classes: str) -> str:
    return " ".join(c for c in classes if c)


def button(
    text: str,
    variant: ButtonVariant | str = ButtonVariant.PRIMARY,
    size: Size | str = Size.MD,
    icon: str | None = None,
    icon_position: IconPosition | str = IconPosition.LEFT,
    full_width: bool = False,
    disabled: bool = False,
    type: str = "button",
    on_click: str | None = None,
    href: str | None = None,
    css_class: str = "",
) -> str:
    """
    Render a button, or an anchor styled as a button when href is given.

    Args:
        text: Button label
        variant: primary, secondary, ghost, danger or success
        size: sm, md or lg
        icon: Optional icon name (see lumui.framework.icons)
        icon_position: left or right of the label
        full_width: Stretch to the container width
        disabled: Render disabled (dimmed, not clickable)
        type: button or submit
        on_click: Alpine.js expression bound to @click
        href: Render an <a> instead of a <button>
        css_class: Extra classes

    Example:
        html = button("Refresh", variant="secondary", icon="refresh", on_click="reload()")
    """
    variant = ButtonVariant(variant)
    size = Size(size)
    if size not in BUTTON_SIZE_CLASSES:
        raise ValueError(f"button size must be sm, md or lg, got {size.value}")
    if type not in ("button", "submit"):
        raise ValueError(f"button type must be 'button' or 'submit', got {type!r}")

    classes = _join_classes(
        BUTTON_BASE_CLASSES,
        BUTTON_VARIANT_CLASSES[variant],
        BUTTON_SIZE_CLASSES[size],
        "w-full" if full_width else "",
        "opacity-50 cursor-not-allowed" if disabled else "",
        css_class,
    )

    return render_template(
        "components/button.html",
        text=text,
        classes=classes,
        icon_html=icons[icon] if icon else None,
        icon_left=IconPosition(icon_position) is IconPosition.LEFT,
        type=type,
        on_click=on_click,
        disabled=disabled,
        href=href,
    )


def card(
    children: str = "",
    title: str | None = None,
    subtitle: str | None = None,
    icon: str | None = None,
    status: str | None = None,
    status_color: StatusColor | str = StatusColor.INFO,
    href: str | None = None,
    css_class: str = "",
) -> str:
    """
    Glass card wrapping already-rendered content.

    Args:
        children: Inner markup (inserted without escaping)
        title: Heading
        subtitle: Muted line under the heading
        icon: Optional icon name shown in the top-left tile
        status: Optional status pill text (top right)
        status_color: Color of the status pill
        href: Wrap the card in a link
        css_class: Extra classes for the card
    """
    return render_template(
        "components/card.html",
        children=mark_safe(children),
        title=title,
        subtitle=subtitle,
        icon_html=icons[icon] if icon else None,
        status=status,
        status_class=TINTED_CLASSES[StatusColor(status_color).value],
        href=href,
        extra_class=css_class,
    )


def stat_card(label: str, value: str, subtext: str | None = None, status: Presence | str | None = None) -> str:
    """Card showing a single headline value, with an optional presence dot."""
    dot_class = None
    if status is not None:
        dot_class = {
            Presence.ONLINE: "bg-[var(--status-success)] animate-pulse",
            Presence.WARNING: "bg-[var(--status-warning)]",
            Presence.OFFLINE: "bg-[var(--status-error)]",
        }[Presence(status)]

    return render_template("components/stat_card.html", label=label, value=value, subtext=subtext, dot_class=dot_class)


ALERT_STYLES = {
    AlertType.SUCCESS: ("success", "check"),
    AlertType.WARNING: ("warning", "exclamation"),
    AlertType.ERROR: ("error", "exclamation"),
    AlertType.INFO: ("info", "info"),
}


def alert(message: str, type: AlertType | str = AlertType.INFO, title: str | None = None, dismissible: bool = False) -> str:
    """
    Inline alert box.

    Dismissible alerts carry an Alpine.js x-data/x-show pair and a close button.
    """
    token, icon_name = ALERT_STYLES[AlertType(type)]
    style = {
        "bg": f"bg-[var(--status-{token})]/10",
        "border": f"border-[var(--status-{token})]/30",
        "text": f"text-[var(--status-{token})]",
    }
    return render_template(
        "components/alert.html",
        message=message,
        title=title,
        dismissible=dismissible,
        style=style,
        icon_html=icons[icon_name],
        close_icon=icons["x"],
    )


def badge(text: str, color: BadgeColor | str = BadgeColor.DEFAULT, size: Size | str = Size.SM, dot: bool = False) -> str:
    """Small rounded label; dot=True prefixes a dot in the current text color."""
    sizes = {Size.SM: "px-2 py-0.5 text-xs", Size.MD: "px-2.5 py-1 text-sm"}
    size = Size(size)
    if size not in sizes:
        raise ValueError(f"badge size must be sm or md, got {size.value}")

    return render_template(
        "components/badge.html",
        text=text,
        color_class=TINTED_CLASSES[BadgeColor(color).value],
        size_class=sizes[size],
        dot=dot,
    )


def text_input(
    name: str,
    type: str = "text",
    placeholder: str | None = None,
    label: str | None = None,
    required: bool = False,
    disabled: bool = False,
    value: str | None = None,
    icon: str | None = None,
    css_class: str = "",
    help_text: str | None = None,
    error: str | None = None,
) -> str:
    """
    Labeled form input.

    The error message replaces help_text and switches the border and focus
    ring to the error color.
    """
    has_error = bool(error)
    classes = _join_classes(
        "w-full bg-[var(--surface-0)] border",
        "border-[var(--status-error)]" if has_error else "border-[var(--border-default)]",
        "rounded-md px-4 py-2.5 text-white placeholder-[var(--text-subtle)] focus:outline-none focus:ring-2",
        "focus:ring-[var(--status-error)]/30" if has_error else "focus:ring-[var(--brand-primary)]/30",
        "focus:border-[var(--brand-primary)] transition-all",
        "pl-10" if icon else "",
        "opacity-50 cursor-not-allowed" if disabled else "",
        css_class,
    )

    return render_template(
        "components/input.html",
        name=name,
        type=type,
        placeholder=placeholder,
        label=label,
        required=required,
        disabled=disabled,
        value=value,
        icon_html=render_icon(icon, "w-5 h-5") if icon else None,
        classes=classes,
        help_text=help_text,
        error=error,
    )


def spinner(size: Size | str = Size.MD, text: str | None = None) -> str:
    sizes = {Size.SM: "h-4 w-4", Size.MD: "h-6 w-6", Size.LG: "h-8 w-8"}
    size = Size(size)
    if size not in sizes:
        raise ValueError(f"spinner size must be sm, md or lg, got {size.value}")
    return render_template("components/spinner.html", size_class=sizes[size], text=text)


def avatar(name: str | None = None, email: str | None = None, src: str | None = None, size: Size | str = Size.MD) -> str:
    """
    Round avatar: an image when src is given, otherwise the uppercased
    initial of the name (or email, or "?").
    """
    sizes = {
        Size.SM: "w-8 h-8 text-sm",
        Size.MD: "w-10 h-10 text-base",
        Size.LG: "w-12 h-12 text-lg",
        Size.XL: "w-16 h-16 text-xl",
    }
    initial = ((name or "")[:1] or (email or "")[:1] or "?").upper()
    return render_template("components/avatar.html", name=name, src=src, size_class=sizes[Size(size)], initial=initial)


def divider(text: str | None = None) -> str:
    """Horizontal rule, optionally with centered text."""
    return render_template("components/divider.html", text=text)
