"""Record reflection, value encoding and element models."""
