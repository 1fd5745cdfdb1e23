"""Extract base64-encoded SVG images embedded in HTML documents."""
