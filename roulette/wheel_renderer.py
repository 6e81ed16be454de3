"""
Wheel Renderer - draws a computed layout with Pillow
"""

from PIL import Image, ImageDraw, ImageFont
import io
import logging
import os
from typing import Optional, Sequence

from .easing import spin_ease
from .geometry import normalize_angle, polar_to_cartesian, rotate_point
from .models import Point, Wedge

logger = logging.getLogger(__name__)

WEDGE_COLORS = [
    '#FFB3BA',
    '#87CEEB',
    '#FFFFBA',
    '#FF9E80',
    '#E6B3FF',
    '#98FB98',
    '#E6B3FF',
    '#98FB98',
]

WINNER_COLOR = '#DC143C'
BACKGROUND_COLOR = '#FFFFFF'
TEXT_COLOR = '#000000'


def truncate_label(text: str, max_chars: int = 15) -> str:
    if len(text) > max_chars:
        return text[:max_chars] + '...'
    return text


class WheelRenderer:

    FONT_FILES = [
        'arial.ttf',
        'Arial.ttf',
        'arial_bold.ttf',
        'helvetica.ttf',
        'Roboto-Regular.ttf',
        'OpenSans-Regular.ttf',
    ]

    SYSTEM_FONTS = [
        "arial.ttf",
        "/System/Library/Fonts/Arial.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
        "/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf",
    ]

    FRAME_MS = 80
    HOLD_FRAMES = 20
    HOLD_FRAME_MS = 100

    def __init__(self, size: int = 600, pointer_angle: float = 270.0, label_max_chars: int = 15):
        self.size = size
        self.center = Point(size / 2, size / 2)
        self.radius = size * 0.42
        self.pointer_angle = pointer_angle
        self.label_max_chars = label_max_chars
        self.font = WheelRenderer.get_font(max(10, size // 36))
        self._label_images = {}

    @staticmethod
    def get_font(size: int = 16):
        """Load a TrueType font from fonts/ next to main.py, then system paths."""
        fonts_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'fonts')
        candidates = [os.path.join(fonts_dir, name) for name in WheelRenderer.FONT_FILES]
        candidates += WheelRenderer.SYSTEM_FONTS

        for font_path in candidates:
            try:
                font = ImageFont.truetype(font_path, size)
                logger.debug(f"✅ Font loaded: {os.path.basename(font_path)} (Size: {size})")
                return font
            except OSError:
                continue

        logger.warning(f"Using default font - text may be small! Size parameter {size} ignored.")
        return ImageFont.load_default()

    def _scale(self, unit_point: Point) -> Point:
        # layout anchors are computed on a unit wheel centered at the origin
        return Point(self.center.x + unit_point.x * self.radius,
                     self.center.y + unit_point.y * self.radius)

    def create_wheel_frame(self, layout: Sequence[Wedge], rotation: float = 0.0,
                           highlight_index: Optional[int] = None) -> Image.Image:
        img = Image.new('RGB', (self.size, self.size), BACKGROUND_COLOR)
        draw = ImageDraw.Draw(img)

        cx, cy, r = self.center.x, self.center.y, self.radius
        box = [cx - r, cy - r, cx + r, cy + r]

        for wedge in layout:
            color = WEDGE_COLORS[wedge.index % len(WEDGE_COLORS)]
            if highlight_index is not None and wedge.index == highlight_index:
                color = WINNER_COLOR

            if len(layout) == 1:
                draw.ellipse(box, fill=color, outline='#FFFFFF', width=2)
            else:
                start = normalize_angle(wedge.start_angle + rotation)
                draw.pieslice(box, start, start + wedge.size, fill=color, outline='#FFFFFF', width=2)

        for wedge in layout:
            self._draw_label(img, wedge, rotation)

        draw.ellipse(box, outline='#E5E7EB', width=3)

        self._draw_pointer(draw)

        hub = max(6, int(r * 0.07))
        draw.ellipse([cx - hub, cy - hub, cx + hub, cy + hub], fill='#000000', outline='#FFFFFF', width=2)

        return img

    def _label_image(self, text: str) -> Image.Image:
        # every frame of a spin redraws the same labels
        text_img = self._label_images.get(text)
        if text_img is not None:
            return text_img

        text_img = Image.new('RGBA', (int(self.radius * 1.2), int(self.radius * 0.3)), (0, 0, 0, 0))
        text_draw = ImageDraw.Draw(text_img)
        # centered by bbox, bitmap fallback fonts don't take anchors
        left, top, right, bottom = text_draw.textbbox((0, 0), text, font=self.font)
        text_x = (text_img.width - (right - left)) / 2 - left
        text_y = (text_img.height - (bottom - top)) / 2 - top
        text_draw.text((text_x, text_y), text, fill=TEXT_COLOR, font=self.font)

        self._label_images[text] = text_img
        return text_img

    def _draw_label(self, img: Image.Image, wedge: Wedge, rotation: float):
        text = truncate_label(wedge.note.label, self.label_max_chars)
        anchor = rotate_point(self._scale(wedge.label_anchor), self.center, rotation)
        text_img = self._label_image(text)

        # Pillow rotates counter-clockwise, the wheel frame is clockwise
        angle = normalize_angle(wedge.label_rotation + rotation)
        rotated = text_img.rotate(-angle, expand=True, resample=Image.Resampling.BICUBIC)

        paste_x = int(anchor.x - rotated.width / 2)
        paste_y = int(anchor.y - rotated.height / 2)
        img.paste(rotated, (paste_x, paste_y), rotated)

    def _draw_pointer(self, draw: ImageDraw.ImageDraw):
        tip = polar_to_cartesian(self.center, self.radius - 8, self.pointer_angle)
        left = polar_to_cartesian(self.center, self.radius + 28, self.pointer_angle - 5)
        right = polar_to_cartesian(self.center, self.radius + 28, self.pointer_angle + 5)
        draw.polygon([(tip.x, tip.y), (left.x, left.y), (right.x, right.y)],
                     fill='#000000', outline='#FFFFFF')

    def create_spin_gif(self, layout: Sequence[Wedge], start_rotation: float, end_rotation: float,
                        duration_ms: int = 4000, winner_index: Optional[int] = None) -> io.BytesIO:
        spin_frames = max(1, round(duration_ms / self.FRAME_MS))
        travel = end_rotation - start_rotation

        logger.info(f"🎨 Rendering spin GIF: {spin_frames} frames, {travel:.1f}° travel")

        frames = []
        for i in range(spin_frames + 1):
            progress = spin_ease(i / spin_frames)
            frames.append(self.create_wheel_frame(layout, start_rotation + travel * progress))

        for _ in range(self.HOLD_FRAMES):
            frames.append(self.create_wheel_frame(layout, end_rotation, highlight_index=winner_index))

        gif_buffer = io.BytesIO()
        frames[0].save(
            gif_buffer,
            format='GIF',
            save_all=True,
            append_images=frames[1:],
            duration=[self.FRAME_MS] * (spin_frames + 1) + [self.HOLD_FRAME_MS] * self.HOLD_FRAMES,
        )
        gif_buffer.seek(0)
        return gif_buffer

    def create_wheel_image(self, layout: Sequence[Wedge], rotation: float = 0.0,
                           highlight_index: Optional[int] = None) -> io.BytesIO:
        buffer = io.BytesIO()
        self.create_wheel_frame(layout, rotation, highlight_index).save(buffer, format='PNG')
        buffer.seek(0)
        return buffer
