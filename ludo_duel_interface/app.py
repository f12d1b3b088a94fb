import os
from typing import List, Optional

os.environ.setdefault("GRADIO_TEMP_DIR", os.path.join(os.getcwd(), "gradio_runtime"))
os.environ.setdefault(
    "GRADIO_CACHE_DIR",
    os.path.join(os.getcwd(), "gradio_runtime", "cache"),
)

import gradio as gr
from loguru import logger

from ludo_duel import Game

from .event_handler import EventHandler


class LudoApp:
    """Gradio front end: one game per browser session."""

    def __init__(self, seed: Optional[int] = None, show_token_ids: bool = True):
        """
        Args:
            seed (Optional[int]): Seed for every new session's dice; None draws from LUDO_SEED or entropy.
            show_token_ids (bool): Whether to label tokens with their index.
        """
        self.seed = seed
        self.handler = EventHandler(show_token_ids=show_token_ids)

    def _start(self):
        game, img, desc = self.handler.init(self.seed)
        return game, img, desc, [desc], desc

    def _with_history(self, frame, history: List[str]):
        game, img, desc = frame
        history = self.handler.record(history or [], desc)
        return game, img, desc, history, "\n".join(reversed(history))

    def create_ui(self):
        with gr.Blocks(title="Ludo Duel", theme=gr.themes.Soft()) as demo:
            gr.Markdown(
                "# Ludo Duel\nRed vs Blue. Roll, then click a highlighted token. "
                "A six brings it out of base and earns another roll."
            )
            game_state = gr.State()
            move_history = gr.State([])

            with gr.Row():
                with gr.Column(scale=3):
                    board = gr.Image(
                        type="pil",
                        interactive=False,
                        show_label=False,
                        elem_classes="board-container",
                    )
                with gr.Column(scale=1):
                    status = gr.Textbox(label="Status", interactive=False)
                    roll_btn = gr.Button("🎲 Roll", variant="primary")
                    reset_btn = gr.Button("Reset")
                    export_btn = gr.Button("Export Game State")
                    history_box = gr.Textbox(label="Move History", lines=12, interactive=False)
                    export_box = gr.Code(label="Game State JSON", language="json")

            outputs = [game_state, board, status, move_history, history_box]

            def _on_roll(game: Game, history):
                return self._with_history(self.handler.roll(game), history)

            def _on_reset(game: Game, history):
                return self._with_history(self.handler.reset(game), [])

            def _on_click(game: Game, history, evt: gr.SelectData):
                x, y = evt.index
                return self._with_history(self.handler.click(game, x, y), history)

            demo.load(self._start, None, outputs)
            roll_btn.click(_on_roll, [game_state, move_history], outputs)
            reset_btn.click(_on_reset, [game_state, move_history], outputs)
            board.select(_on_click, [game_state, move_history], outputs)
            export_btn.click(self.handler.export, [game_state], [export_box])

        return demo

    def launch(self, server_name="0.0.0.0", server_port=7860, **kwargs):
        demo = self.create_ui()
        logger.info("Serving Ludo Duel on {}:{}", server_name, server_port)
        demo.launch(server_name=server_name, server_port=server_port, **kwargs)


def launch_app(seed: Optional[int] = None):
    return LudoApp(seed=seed)


if __name__ == "__main__":
    launch_app().launch(share=False, inbrowser=True, show_error=True)
