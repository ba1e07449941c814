from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

TEXT_COLOR = (236, 240, 241)

FONT_CANDIDATES = [
    "Pretendard",
    "Apple SD Gothic Neo",
    "Malgun Gothic",
    "NanumGothic",
    "Noto Sans CJK KR",
    "Arial Unicode MS",
    "Arial",
]


@dataclass
class Fonts:
    title: pygame.font.Font
    body: pygame.font.Font
    small: pygame.font.Font


def get_font(size: int, bold: bool = False) -> pygame.font.Font:
    """환경에 설치된 한글 지원 폰트를 찾아 반환한다."""
    for name in FONT_CANDIDATES:
        font_path = pygame.font.match_font(name, bold=bold)
        if font_path:
            return pygame.font.Font(font_path, size)
    return pygame.font.SysFont(None, size, bold=bold)


def load_fonts() -> Fonts:
    return Fonts(title=get_font(30, bold=True), body=get_font(22), small=get_font(16))


def draw_overlay(surface: pygame.Surface, *, alpha: int = 120) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, max(0, min(255, alpha))))
    surface.blit(overlay, (0, 0))


def draw_card(surface: pygame.Surface, rect: pygame.Rect, *, fill=(52, 73, 94), border=(236, 240, 241)) -> None:
    shadow = pygame.Surface((rect.width + 10, rect.height + 10), pygame.SRCALPHA)
    pygame.draw.rect(shadow, (0, 0, 0, 60), shadow.get_rect(), border_radius=14)
    surface.blit(shadow, (rect.x - 5, rect.y - 3))

    pygame.draw.rect(surface, fill, rect, border_radius=14)
    pygame.draw.rect(surface, border, rect, width=2, border_radius=14)


def draw_text_center(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    y: int,
    *,
    color=TEXT_COLOR,
    center_x: Optional[int] = None,
) -> pygame.Rect:
    rendered = font.render(text, True, color)
    x = surface.get_width() // 2 if center_x is None else center_x
    rect = rendered.get_rect(center=(x, y))
    surface.blit(rendered, rect)
    return rect


def draw_button(surface: pygame.Surface, rect: pygame.Rect, font: pygame.font.Font, label: str) -> None:
    pygame.draw.rect(surface, (39, 174, 96), rect, border_radius=8)
    pygame.draw.rect(surface, (30, 132, 73), rect, width=2, border_radius=8)
    draw_text_center(surface, font, label, rect.centery, center_x=rect.centerx)


def draw_game_over_ui(
    surface: pygame.Surface,
    *,
    fonts: Fonts,
    reason: str,
    score: int,
    best_score: int,
    hint: str,
    area: Optional[pygame.Rect] = None,
) -> None:
    """게임오버 공통 UI(반투명 오버레이 + 카드 + 최종/최고 점수)."""
    draw_overlay(surface, alpha=178)

    area = area or surface.get_rect()
    card = pygame.Rect(0, 0, min(340, area.width - 20), 230)
    card.center = area.center
    draw_card(surface, card)

    cx = card.centerx
    draw_text_center(surface, fonts.title, "게임 오버!", card.top + 36, center_x=cx)
    draw_text_center(surface, fonts.small, reason, card.top + 70, color=(189, 195, 199), center_x=cx)
    draw_text_center(surface, fonts.body, f"최종 점수: {score}", card.top + 110, center_x=cx)
    draw_text_center(surface, fonts.body, f"최고 점수: {best_score}", card.top + 142, center_x=cx)
    draw_text_center(surface, fonts.small, hint, card.top + 196, color=(189, 195, 199), center_x=cx)
