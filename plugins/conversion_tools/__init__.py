"""Conversion tools plugin."""

manifest = {
    "title": "Conversion Tools",
    "summary": "Convert mass, volume, area, temperature, pressure, fuel economy and more between common units.",
    "blueprint": "conversion_tools",
    "category": "Conversion Tools",
    "icon": "img/ConversionTools_icon.png",
}


__all__ = ["manifest"]
