"""Keyword-graph chatbot that answers by closest keyword match."""