"""Application layer: editing session state and rename history."""
