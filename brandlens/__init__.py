"""Brand visibility analysis for generative-AI responses."""
