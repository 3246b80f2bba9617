"""Render shareable roast certificates (the NFT artwork) using Pillow."""

import io
import os
import textwrap
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

CARD_W, CARD_H = 1200, 630
FONTS_DIR = Path(__file__).parent.parent / "static" / "fonts"
MAX_ROAST_LINES = 7

NAVY = (12, 28, 68)
RED = (178, 34, 52)
GOLD = (212, 175, 55)
CREAM = (250, 246, 233)


def _font(bold: bool = False, size: int = 24) -> ImageFont.FreeTypeFont:
    name = "Inter-Bold.ttf" if bold else "Inter-Regular.ttf"
    path = FONTS_DIR / name
    if path.exists():
        return ImageFont.truetype(str(path), size)
    for fallback in ["/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
                     "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"]:
        if os.path.exists(fallback):
            return ImageFont.truetype(fallback, size)
    return ImageFont.load_default()


def _verdict(score: int) -> str:
    return "APPROVED" if score >= 50 else "REJECTED"


def _wrap_roast(text: str, width: int = 80) -> list[str]:
    lines = textwrap.wrap(text, width=width)
    if len(lines) > MAX_ROAST_LINES:
        lines = lines[:MAX_ROAST_LINES]
        lines[-1] = lines[-1].rstrip(".!? ") + "..."
    return lines


def _draw_border(draw: ImageDraw.Draw):
    """Double gold frame with red/navy stripes along the top."""
    draw.rectangle([12, 12, CARD_W - 12, CARD_H - 12], outline=GOLD, width=6)
    draw.rectangle([26, 26, CARD_W - 26, CARD_H - 26], outline=NAVY, width=2)
    for i in range(7):
        color = RED if i % 2 == 0 else CREAM
        draw.rectangle([32, 32 + i * 6, CARD_W - 32, 37 + i * 6], fill=color)


def _draw_seal(draw: ImageDraw.Draw, cx: int, cy: int, score: int):
    r = 70
    draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=NAVY, outline=GOLD, width=5)
    draw.ellipse([cx - r + 12, cy - r + 12, cx + r - 12, cy + r - 12], outline=GOLD, width=2)
    score_font = _font(bold=True, size=40)
    label_font = _font(False, 14)
    text = str(score)
    w = draw.textlength(text, font=score_font)
    draw.text((cx - w / 2, cy - 30), text, fill=CREAM, font=score_font)
    w = draw.textlength("/ 100", font=label_font)
    draw.text((cx - w / 2, cy + 16), "/ 100", fill=GOLD, font=label_font)


def generate_card(roast: str, score: int, is_executive_order: bool = False) -> bytes:
    """Generate a PNG certificate for a roast and return the bytes."""
    img = Image.new("RGB", (CARD_W, CARD_H), CREAM)
    draw = ImageDraw.Draw(img)
    _draw_border(draw)

    header_font = _font(bold=True, size=36)
    header = "EXECUTIVE ORDER" if is_executive_order else "PRESIDENTIAL ROAST"
    w = draw.textlength(header, font=header_font)
    draw.text(((CARD_W - w) / 2, 90), header, fill=NAVY, font=header_font)

    sub_font = _font(False, 18)
    sub = "By order of the President, this roast is hereby declared official"
    w = draw.textlength(sub, font=sub_font)
    draw.text(((CARD_W - w) / 2, 138), sub, fill=RED, font=sub_font)

    line_font = _font(False, 22)
    y_pos = 190
    for line in _wrap_roast(roast):
        draw.text((70, y_pos), line, fill=(30, 30, 40), font=line_font)
        y_pos += 32

    _draw_seal(draw, CARD_W - 140, CARD_H - 130, score)

    verdict_font = _font(bold=True, size=30)
    verdict = _verdict(score)
    draw.text((70, CARD_H - 110), verdict, fill=RED if verdict == "REJECTED" else NAVY, font=verdict_font)

    wm_font = _font(False, 14)
    draw.text((70, CARD_H - 60), "presidentialroast.app", fill=(120, 110, 100), font=wm_font)

    buf = io.BytesIO()
    img.save(buf, format="PNG", optimize=True)
    return buf.getvalue()
