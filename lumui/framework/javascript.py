"""
Client Runtime Scripts

Script and link tags for the client-side runtimes that consume lumui markup:
    - Tailwind CSS (CDN build) with the theme configuration
    - Alpine.js (+ collapse plugin) for x-data / x-show / @click attributes
    - HTMX for hx-get / hx-trigger / hx-swap attributes
    - uPlot for time_series_chart()

lumui only emits these tags and attributes; it never executes them.
"""

TAILWIND_CDN = "https://cdn.tailwindcss.com"
ALPINE_CDN = "https://unpkg.com/alpinejs@3.x.x/dist/cdn.min.js"
ALPINE_COLLAPSE_CDN = "https://unpkg.com/@alpinejs/collapse@3.x.x/dist/cdn.min.js"
HTMX_CDN = "https://unpkg.com/htmx.org@1.9.10"
UPLOT_VERSION = "1.6.30"


def get_resource_hints():
    """
    Returns preload/preconnect hints for the CDN hosts.
    """
    return f"""
      <link rel="preload" href="{TAILWIND_CDN}" as="script">
      <link rel="dns-prefetch" href="https://unpkg.com">
      <link rel="preconnect" href="https://unpkg.com" crossorigin>
    """


def get_runtime_scripts(tailwind_config: str):
    """
    Returns the runtime script tags for a page head.

    Args:
        tailwind_config: tailwind.config assignment produced by the theme generator

    Returns:
        HTML string of <script> tags (Tailwind, Alpine.js, HTMX)
    """
    return f"""
      <!-- TailwindCSS - Non-blocking load with immediate execution -->
      <script src="{TAILWIND_CDN}"></script>
      <script>{tailwind_config}</script>

      <!-- Alpine.js - Deferred -->
      <script defer src="{ALPINE_COLLAPSE_CDN}"></script>
      <script defer src="{ALPINE_CDN}"></script>

      <!-- HTMX - Loaded synchronously for immediate availability -->
      <script src="{HTMX_CDN}"></script>
    """


def get_chart_scripts():
    """
    Returns the uPlot stylesheet and script tags required by time_series_chart().
    """
    return (
        f'<link rel="stylesheet" href="https://unpkg.com/uplot@{UPLOT_VERSION}/dist/uPlot.min.css">\n'
        f'<script src="https://unpkg.com/uplot@{UPLOT_VERSION}/dist/uPlot.iife.min.js"></script>'
    )
