"""
TicTacToe UI
A graphical interface for the game using Tkinter.

Shows:
- The board (click a cell to play)
- Game status (winner or next player)
- Move history (click an entry to go back to it)
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

from logic.config import GameConfig
from logic.errors import GameError
from logic.game_engine import GameEngine
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class for the game.
    """

    def __init__(self, engine: Optional[GameEngine] = None,
                 display_config: Optional[DisplayConfig] = None):
        """Initialize the UI."""
        self.engine = engine or GameEngine(GameConfig())
        self.display_config = display_config or DisplayConfig()
        self.renderer = BoardRenderer(self.display_config)

        self._create_ui()
        self.refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.display_config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.WINDOW_BG)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.WINDOW_BG)
        style.configure('TLabel', background=cfg.WINDOW_BG, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 14, 'bold'), foreground='#ffd700')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, padx=(0, 10))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        size = self.renderer.size
        self.board_canvas = tk.Canvas(left_frame, width=size, height=size, bg=cfg.PANEL_BG,
                                      highlightthickness=2, highlightbackground='#00d4ff')
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        # Right panel - history
        right_frame = ttk.Frame(main_frame, width=260)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="Game History", style='Title.TLabel').pack(pady=(0, 10))

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True)

        # Control buttons
        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def refresh(self):
        """Redraw board, status and history from the engine."""
        self._update_board_canvas()
        self.status_label.configure(text=self.engine.status)
        self._update_history()

    def _update_board_canvas(self):
        """Draw the current snapshot on the canvas."""
        frame_rgb = self.renderer.render_rgb(self.engine.current_board, self.engine.win_result)
        photo = ImageTk.PhotoImage(Image.fromarray(frame_rgb))

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _update_history(self):
        """Rebuild the list of history buttons."""
        for child in self.history_frame.winfo_children():
            child.destroy()

        current = self.engine.current_step
        for step, label in self.engine.history_entries():
            is_current = step == current
            tk.Button(
                self.history_frame,
                text=label,
                font=('Segoe UI', 10, 'bold' if is_current else 'normal'),
                bg='#10b981' if is_current else '#3b82f6',
                fg='white',
                width=22,
                command=lambda s=step: self._jump_to(s)
            ).pack(pady=2)

    def _on_board_click(self, event):
        """Play the cell under the mouse."""
        index = self.renderer.cell_at(event.x, event.y)
        if index is None:
            return
        try:
            self.engine.apply_move(index)
        except GameError as e:
            print(f"Move rejected: {e}")
        self.refresh()

    def _jump_to(self, step: int):
        try:
            self.engine.jump_to(step)
        except GameError as e:
            print(f"Jump failed: {e}")
        self.refresh()

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.engine.reset()
        self.refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report illegal moves instead of ignoring them"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(GameEngine(strict=args.strict))
    ui.run()


if __name__ == "__main__":
    main()
