from typing import Collection, Dict, Hashable, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from panegrid.config import DEFAULT_ASPECT_RATIO
from panegrid.geometry import content_region
from panegrid.models import Container, Layout, PaneSpec


PANE_COLORS = [
    (255, 99, 71),
    (135, 206, 235),
    (60, 179, 113),
    (238, 130, 238),
    (255, 215, 0),
    (30, 144, 255),
]
BACKGROUND = (24, 24, 24, 255)


def _load_font(font_size: int):
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size=font_size)
    except OSError:
        try:
            return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size=font_size)
        except OSError:
            return ImageFont.load_default()


def render_layout(
    container: Container,
    layout: Layout,
    panes: Sequence[PaneSpec] = (),
    skip: Collection[Hashable] = (),
    font_size: int = 16,
) -> Image.Image:
    """Draw a layout onto a canvas the size of the container.

    Cells are drawn in ascending z-order so higher panes cover lower ones.
    Each cell shows its full allocation as an outline and its visible picture
    as a filled box. Panes listed in ``skip`` (e.g. ones a viewer has popped
    out to fullscreen) are left off the canvas.
    """

    size = (max(1, int(round(container.width))), max(1, int(round(container.height))))
    canvas = Image.new("RGBA", size, BACKGROUND)
    font = _load_font(font_size)

    ratios: Dict[Hashable, float] = {p.pane_id: p.effective_aspect_ratio for p in panes}
    colors: Dict[Hashable, Tuple[int, int, int]] = {}
    for idx, cell in enumerate(layout.cells):
        colors[cell.pane_id] = PANE_COLORS[idx % len(PANE_COLORS)]

    order = sorted(
        range(len(layout.cells)),
        key=lambda i: (layout.cells[i].z_index if layout.cells[i].z_index is not None else 0, i),
    )
    for i in order:
        cell = layout.cells[i]
        if cell.pane_id in skip:
            continue
        color = colors[cell.pane_id]
        ratio: Optional[float] = ratios.get(cell.pane_id)
        if ratio is None:
            ratio = cell.width / cell.height if cell.height > 0 else DEFAULT_ASPECT_RATIO
        content = content_region(cell.rect, ratio)

        layer = Image.new("RGBA", size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        draw.rectangle(
            [cell.x, cell.y, cell.x + cell.width, cell.y + cell.height],
            fill=(0, 0, 0, 255),
            outline=color + (255,),
            width=2,
        )
        draw.rectangle(
            [content.x, content.y, content.right, content.bottom],
            fill=color + (180,),
        )
        draw.text((content.x + 4, content.y + 4), str(cell.pane_id), fill=(255, 255, 255, 255), font=font)
        canvas.alpha_composite(layer)
    return canvas


def save_preview(
    container: Container,
    layout: Layout,
    panes: Sequence[PaneSpec],
    path: str,
    skip: Collection[Hashable] = (),
) -> None:
    image = render_layout(container, layout, panes, skip=skip)
    image.convert("RGB").save(path)
