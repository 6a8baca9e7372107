import logging

import gradio as gr

from typezero.handlers import (
    DIALECT_LABELS,
    change_dialect_handler,
    generate_code_handler,
    load_json_file_handler,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

SAMPLE_JSON = """{
  "id": 1,
  "tags": ["a", "b"],
  "meta": {"active": true}
}"""

# --- UI Definition ---
with gr.Blocks(title="TypeZero") as demo:
    gr.Markdown("# TypeZero")
    gr.Markdown("Paste or upload JSON and get TypeScript, Zod, SQL or Pydantic definitions.")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Input")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            json_input = gr.Code(label="JSON", language="json", value=SAMPLE_JSON, interactive=True)
            status_msg = gr.Textbox(label="Status", interactive=False)

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### 2. Output")
            dialect_selector = gr.Radio(
                choices=list(DIALECT_LABELS),
                value="TypeScript",
                label="Target",
            )
            root_name = gr.Textbox(label="Root Name", placeholder="Root")
            code_output = gr.Code(label="Generated Code", language="typescript", interactive=False)

    file_input.upload(
        fn=load_json_file_handler,
        inputs=[file_input],
        outputs=[json_input, status_msg],
    )

    json_input.change(
        fn=generate_code_handler,
        inputs=[json_input, dialect_selector, root_name],
        outputs=[code_output, status_msg],
    )

    root_name.change(
        fn=generate_code_handler,
        inputs=[json_input, dialect_selector, root_name],
        outputs=[code_output, status_msg],
    )

    dialect_selector.change(
        fn=change_dialect_handler,
        inputs=[json_input, dialect_selector, root_name],
        outputs=[code_output, status_msg],
    )

    demo.load(
        fn=generate_code_handler,
        inputs=[json_input, dialect_selector, root_name],
        outputs=[code_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
