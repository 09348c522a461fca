"""
TicTacToe UI
A graphical interface for the TicTacToe engine using Tkinter.

Shows:
- The 3x3 board, with the winning line highlighted
- Game status and whose turn it is
- Turn countdown (the turn passes to the opponent when it runs out)
- Accumulated score, with the leader highlighted
"""

import tkinter as tk
from tkinter import ttk

from loguru import logger

from engine import EngineConfig, Game, GameStatus, Outcome, Player, TurnTimer, format_time


PLAYER_COLORS = {
    Player.X: '#f87171',
    Player.O: '#10b981',
}


class TicTacToeUI:
    """
    Main UI class for the TicTacToe game.
    """

    def __init__(self, turn_seconds: int = EngineConfig.TURN_DURATION_SECONDS):
        """Initialize the UI."""
        self.game = Game()
        self.timer = TurnTimer(turn_seconds, on_timeout=self._on_timeout)

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.minsize(420, 600)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Score.TLabel', font=('Segoe UI', 12))
        style.configure('Leader.TLabel', font=('Segoe UI', 12, 'bold'), foreground='#ffd700')

        # Score board section
        ttk.Label(main_frame, text="📊 Accumulated Score", style='Title.TLabel').pack()

        score_frame = ttk.Frame(main_frame)
        score_frame.pack(pady=5)

        self.score_labels = {}
        for outcome, text in ((Outcome.X, "Player X"), (Outcome.DRAW, "Draws"), (Outcome.O, "Player O")):
            label = ttk.Label(score_frame, text=f"{text}: 0", style='Score.TLabel')
            label.pack(side=tk.LEFT, padx=10)
            self.score_labels[outcome] = (label, text)

        # Timer section
        self.timer_label = ttk.Label(main_frame, text="")
        self.timer_label.pack(pady=(10, 0))

        self.timer_bar = ttk.Progressbar(main_frame, maximum=100, length=300)
        self.timer_bar.pack(pady=5)

        # Game status section
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        # Board (3x3 grid of buttons)
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        size = EngineConfig.BOARD_SIZE
        self.board_cells = []
        for index in range(EngineConfig.CELL_COUNT):
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg='#16213e',
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=index // size, column=index % size, padx=2, pady=2)
            self.board_cells.append(cell)

        # Control buttons
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="▶ New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._new_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="🔄 Reset Scores",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_scores
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            main_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Try to place the current player's mark."""
        if self.game.attempt_move(index):
            self.timer.reset()
            if not self.game.is_playing():
                self.timer.pause()
        self._refresh()

    def _on_timeout(self):
        """Turn ran out: the opponent plays next."""
        self.game.pass_turn()

    def _tick(self):
        """Advance the turn timer (runs on the UI thread once per second)."""
        self.timer.tick()
        self._refresh()
        self.root.after(1000, self._tick)

    def _new_game(self):
        self.game.reset_game()
        self.timer.reset()
        self._refresh()

    def _reset_scores(self):
        self.game.reset_scores()
        self._refresh()

    def _refresh(self):
        """Redraw board, status, timer and scores from the game state."""
        state = self.game.state

        for index, cell in enumerate(self.board_cells):
            mark = state.board[index]
            if mark is None:
                cell.configure(text="", bg='#16213e', fg='white')
            else:
                bg_color = '#ffd700' if index in state.winning_cells else '#16213e'
                cell.configure(text=mark.value, bg=bg_color, fg=PLAYER_COLORS[Player(mark)])

        if state.status == GameStatus.WIN:
            self.status_label.configure(text=f"🏆 Player {state.winner.value} wins!")
            self.turn_label.configure(text="Game Over")
        elif state.status == GameStatus.DRAW:
            self.status_label.configure(text="🤝 It's a DRAW!")
            self.turn_label.configure(text="Game Over")
        else:
            self.status_label.configure(text="Game in progress")
            self.turn_label.configure(text=f"Turn: {state.current_player.value}")

        self.timer_label.configure(text=f"⏱ {format_time(self.timer.time_left)}")
        self.timer_bar.configure(value=self.timer.percentage)

        leader = self.game.leader()
        scores = self.game.scores
        for outcome, (label, text) in self.score_labels.items():
            style = 'Leader.TLabel' if outcome == leader else 'Score.TLabel'
            label.configure(text=f"{text}: {scores.count(outcome)}", style=style)

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.after(1000, self._tick)
        self.root.mainloop()
