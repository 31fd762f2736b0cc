"""Site theme tokens.

Colors, fonts, animations and spacing shared by every page. The base
template inlines ``Theme.to_css()`` so exported pages need no build step
for styling.
"""

from typing import Dict, List

from pydantic import BaseModel, Field


class Animation(BaseModel):
    name: str
    value: str
    keyframes: Dict[str, Dict[str, str]]


def _default_animations() -> List[Animation]:
    return [
        Animation(
            name="fade-in",
            value="fade-in 1s cubic-bezier(0.4,0,0.2,1) both",
            keyframes={
                "from": {"opacity": "0", "transform": "translateY(32px)"},
                "to": {"opacity": "1", "transform": "translateY(0)"},
            },
        ),
        Animation(
            name="float",
            value="float 6s ease-in-out infinite",
            keyframes={
                "0%, 100%": {"transform": "translateY(0px)"},
                "50%": {"transform": "translateY(-20px)"},
            },
        ),
    ]


class Theme(BaseModel):
    colors: Dict[str, str] = Field(default_factory=lambda: {"primary": "#0071C5"})
    font_sans: List[str] = Field(default_factory=lambda: ["Manrope", "sans-serif"])
    animations: List[Animation] = Field(default_factory=_default_animations)
    background_images: Dict[str, str] = Field(
        default_factory=lambda: {"hero-pattern": "/bg-abstract.png"}
    )
    letter_spacing: Dict[str, str] = Field(
        default_factory=lambda: {
            "tightest": "-.075em",
            "tighter": "-.05em",
            "normal": "0",
            "wider": ".05em",
            "widest": ".5em",
        }
    )

    def custom_properties(self, asset_url=None) -> Dict[str, str]:
        props = {f"--color-{name}": value for name, value in self.colors.items()}
        props["--font-sans"] = ", ".join(_font_name(f) for f in self.font_sans)
        for name, value in self.letter_spacing.items():
            props[f"--tracking-{name}"] = value
        for name, path in self.background_images.items():
            url = asset_url(path) if asset_url else path
            props[f"--bg-{name}"] = f"url('{url}')"
        for animation in self.animations:
            props[f"--animate-{animation.name}"] = animation.value
        return props

    def to_css(self, asset_url=None) -> str:
        lines = [":root {"]
        for name, value in self.custom_properties(asset_url).items():
            lines.append(f"  {name}: {value};")
        lines.append("}")
        for animation in self.animations:
            lines.append(f"@keyframes {animation.name} {{")
            for step, rules in animation.keyframes.items():
                body = " ".join(f"{prop}: {value};" for prop, value in rules.items())
                lines.append(f"  {step} {{ {body} }}")
            lines.append("}")
            lines.append(
                f".animate-{animation.name} {{ animation: var(--animate-{animation.name}); }}"
            )
        return "\n".join(lines)


def _font_name(font: str) -> str:
    # generic families must stay unquoted
    if font in ("serif", "sans-serif", "monospace", "cursive", "system-ui"):
        return font
    return f"'{font}'"


theme = Theme()
