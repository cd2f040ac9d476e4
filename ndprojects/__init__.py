"""Small programs: OpenStreetMap route planner, graph chatbot, snake game logic and process helpers."""

__version__ = "0.1.0"