from backend.engine.gamestate.state import BoardConfiguration, Cell, Configuration

__all__ = ["BoardConfiguration", "Cell", "Configuration"]
