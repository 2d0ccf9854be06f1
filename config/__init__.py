from .model import ModelSettings, model_settings

__all__ = ["ModelSettings", "model_settings"]
