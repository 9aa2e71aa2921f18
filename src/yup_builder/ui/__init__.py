"""
Browser UI for the Yup schema builder.

``handlers`` holds the state transitions; ``app`` wires them into Gradio.
``app`` is not imported here so the handlers can be used without Gradio.
"""
