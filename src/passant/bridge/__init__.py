"""PyQt6 signal bridge for presentation layers."""
