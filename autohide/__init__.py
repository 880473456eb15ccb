"""Hide Waybar on Hyprland and reveal it with a quick flick of the cursor."""

__version__ = "0.1.0"