"""
Critical Base Styles

Styles applied before the Tailwind runtime loads, so pages do not flash
unstyled content. The theme's CSS variables are appended by the caller.
"""


def get_base_styles():
    """
    Returns the critical CSS inlined in every page head.

    Includes:
    - Tap highlight reset
    - Body font, background and smoothing (falls back to the default surface color)
    - Alpine.js x-cloak rule
    - Box-sizing and min-height helpers

    Returns:
        String of CSS rules (no <style> wrapper)
    """
    return """
        /* Base styles - applied before TailwindCSS loads */
        html { -webkit-tap-highlight-color: transparent; }
        body {
          margin: 0;
          padding: 0;
          font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
          background-color: var(--surface-0, #0A0A0F);
          color: white;
          line-height: 1.5;
          -webkit-font-smoothing: antialiased;
          -moz-osx-font-smoothing: grayscale;
        }

        /* Alpine.js x-cloak - hide elements until Alpine initializes */
        [x-cloak] { display: none !important; }

        /* Prevent layout shift during load */
        * { box-sizing: border-box; }

        /* Critical layout styles */
        .min-h-screen { min-height: 100vh; }
    """
