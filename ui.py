"""
TicTacToe UI
A graphical interface for playing TicTacToe against the computer using Tkinter.

Shows:
- The board, drawn with OpenCV (hovered cell highlighted)
- Whose turn it is and the game status
- The winning line and end message when a game finishes
"""

import cv2
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
import time
from typing import Optional

# Logic imports
from logic.config import GameConfig
from logic.orchestrator import GameOrchestrator, GameStatus

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The Tk event loop is the game loop: every frame the orchestrator gets
    the elapsed time and the board is redrawn. The computer's search runs
    on its own thread, so the window stays responsive while it thinks.
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        """Initialize the UI."""
        self.game_config = game_config or GameConfig()
        self.display_config = display_config or DisplayConfig()

        self.game = GameOrchestrator(self.game_config)
        self.renderer = BoardRenderer(self.game_config, self.display_config)

        self.is_running = False
        self.hover_index: Optional[int] = None
        self.last_frame_time = time.perf_counter()
        self.last_frame = None

        # Create UI
        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.display_config.WINDOW_TITLE)
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        # Board canvas
        size = self.renderer.size
        self.board_canvas = tk.Canvas(
            main_frame, width=size, height=size, bg='#0f0f1a',
            highlightthickness=2, highlightbackground='#00d4ff'
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Motion>", self._on_mouse_move)
        self.board_canvas.bind("<Leave>", self._on_mouse_leave)
        self.board_canvas.bind("<Button-1>", self._on_click)

        # Game status section
        self.status_label = ttk.Label(main_frame, text="Starting...", style='Status.TLabel')
        self.status_label.pack(pady=(10, 0))

        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=('Segoe UI', 10, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 10, 'bold'),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Keyboard shortcuts
        self.root.bind("<KeyPress-r>", lambda event: self._reset_game())
        self.root.bind("<KeyPress-q>", lambda event: self._quit())
        self.root.bind("<KeyPress-s>", lambda event: self._save_screenshot())

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_mouse_move(self, event):
        self.hover_index = self.renderer.pixel_to_index(event.x, event.y)

    def _on_mouse_leave(self, event):
        self.hover_index = None

    def _on_click(self, event):
        """Turn a click into a move."""
        index = self.renderer.pixel_to_index(event.x, event.y)
        if index is None:
            return
        self.game.cell_clicked(index)

    def _update_loop(self):
        """Main update loop (runs on UI thread)."""
        if not self.is_running:
            return

        now = time.perf_counter()
        elapsed = now - self.last_frame_time
        self.last_frame_time = now

        try:
            self.game.update(elapsed)

            frame = self.renderer.render(
                self.game.board,
                hover_index=self.hover_index if not self.game.is_game_over else None,
                winning_move=self.game.winning_move,
                end_message=self.game.end_message
            )
            self.last_frame = frame
            self._update_board_canvas(frame)
            self._update_game_info()

        except Exception as e:
            print(f"Update error: {e}")

        # Schedule next update
        if self.is_running:
            self.root.after(self.display_config.FRAME_DELAY_MS, self._update_loop)

    def _update_board_canvas(self, frame):
        """Show a rendered frame on the canvas."""
        # Convert BGR to RGB
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

        # Convert to PIL Image
        image = Image.fromarray(frame_rgb)
        photo = ImageTk.PhotoImage(image)

        # Update canvas
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _update_game_info(self):
        """Update game status labels."""
        status = self.game.status

        if status == GameStatus.GAME_ENDED:
            self.status_label.configure(text=self.game.end_message)
            self.turn_label.configure(text="Game Over - new game starting...")
            return

        mover = self.game.current_player.symbol
        if status == GameStatus.AWAITING_SEARCH_RESULT:
            self.status_label.configure(text="Computer is thinking...")
            self.turn_label.configure(text=f"Turn: {mover} (Computer)")
        else:
            self.status_label.configure(text="Game in progress")
            self.turn_label.configure(text=f"Turn: {mover} (Human)")

    def _save_screenshot(self):
        if self.last_frame is None:
            return
        filename = f"tictactoe_{int(time.time())}.png"
        cv2.imwrite(filename, self.last_frame)
        print(f"Saved: {filename}")

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.game.reset()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.is_running = False
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.is_running = True
        self.last_frame_time = time.perf_counter()
        self.root.after(0, self._update_loop)
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
