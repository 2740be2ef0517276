import numpy as np
import pygame

from .dist_table import UNREACHED
from .problem import Problem

# colors
COLOR_BG = (30, 30, 30)
COLOR_SOURCE = (230, 130, 20)
COLOR_UNREACHED = (60, 60, 60)
COLOR_NEAR = (240, 240, 240)
COLOR_FAR = (50, 80, 160)
COLOR_GRID_LINE = (200, 200, 200)
COLOR_LABEL = (20, 20, 20)
COLOR_STATUS_BG = (40, 40, 40)
COLOR_STATUS_TEXT = (220, 220, 220)
COLOR_BUTTON_BG = (70, 70, 70)
COLOR_BUTTON_ACTIVE = (50, 130, 200)
COLOR_BUTTON_BORDER = (100, 100, 100)


def distance_to_color(distance: int, max_distance: int) -> tuple[int, int, int]:
    """Map a distance onto a linear ramp from COLOR_NEAR to COLOR_FAR."""
    if distance == UNREACHED:
        return COLOR_UNREACHED
    if distance == 0:
        return COLOR_SOURCE
    ratio = distance / max_distance if max_distance > 0 else 0.0
    ratio = min(max(ratio, 0.0), 1.0)
    return tuple(
        int(round(n + (f - n) * ratio)) for n, f in zip(COLOR_NEAR, COLOR_FAR)
    )


def max_reached_distance(solution: np.ndarray) -> int:
    reached = solution[solution != UNREACHED]
    return int(reached.max()) if reached.size else 0


def render_heatmap(solution: np.ndarray, cell_px: int) -> pygame.Surface:
    h, w = solution.shape
    surface = pygame.Surface((w * cell_px, h * cell_px))
    surface.fill(COLOR_BG)
    max_d = max_reached_distance(solution)
    for y in range(h):
        for x in range(w):
            rect = pygame.Rect(x * cell_px, y * cell_px, cell_px, cell_px)
            pygame.draw.rect(surface, distance_to_color(int(solution[y, x]), max_d), rect)
            pygame.draw.rect(surface, COLOR_GRID_LINE, rect, 1)
    return surface


def run_visualizer(problem: Problem, solution: np.ndarray, pixels_per_cell: int = 24):
    h, w = solution.shape
    cell_px = pixels_per_cell
    status_height = 56
    grid_h_px = h * cell_px
    win_w = max(w * cell_px, 360)
    win_h = grid_h_px + status_height

    pygame.init()
    screen = pygame.display.set_mode((win_w, win_h))
    pygame.display.set_caption(f"Distance to target {problem.target}")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", max(10, int(cell_px // 2)))
    status_font = pygame.font.SysFont("consolas", 16)

    # pre-render static heatmap
    heatmap = render_heatmap(solution, cell_px)

    # checkbox: show distance labels
    show_labels = cell_px >= 16
    cb_label_surf = status_font.render("Labels", True, COLOR_STATUS_TEXT)
    cb_size = 14
    checkbox_rect = pygame.Rect(10, grid_h_px + 32, cb_size, cb_size)
    cb_label_x = checkbox_rect.right + 5

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if checkbox_rect.collidepoint(event.pos):
                    show_labels = not show_labels

        clock.tick(30)

        screen.fill(COLOR_BG)
        screen.blit(heatmap, (0, 0))

        if show_labels:
            for y in range(h):
                for x in range(w):
                    d = int(solution[y, x])
                    text = "-" if d == UNREACHED else str(d)
                    label = font.render(text, True, COLOR_LABEL)
                    center = (int(x * cell_px + cell_px / 2), int(y * cell_px + cell_px / 2))
                    screen.blit(label, label.get_rect(center=center))

        # status bar: hovered cell
        status_rect = pygame.Rect(0, grid_h_px, win_w, status_height)
        pygame.draw.rect(screen, COLOR_STATUS_BG, status_rect)
        mx, my = pygame.mouse.get_pos()
        row, col = my // cell_px, mx // cell_px
        if 0 <= row < h and 0 <= col < w:
            d = int(solution[row, col])
            status_text = (
                f"({row}, {col})  |  value: {int(problem.matrix[row, col])}  |  "
                f"distance: {'unreached' if d == UNREACHED else d}"
            )
        else:
            status_text = f"{h}x{w}  |  max distance: {max_reached_distance(solution)}"
        screen.blit(status_font.render(status_text, True, COLOR_STATUS_TEXT), (10, grid_h_px + 8))

        if show_labels:
            pygame.draw.rect(screen, COLOR_BUTTON_ACTIVE, checkbox_rect)
        else:
            pygame.draw.rect(screen, COLOR_BUTTON_BG, checkbox_rect)
        pygame.draw.rect(screen, COLOR_BUTTON_BORDER, checkbox_rect, 1)
        screen.blit(cb_label_surf, (cb_label_x, checkbox_rect.y - 1))

        pygame.display.flip()

    pygame.quit()
