# app/services - Business logic layer
from .model_service import ModelService
from .export_service import ExportService

__all__ = ['ModelService', 'ExportService']
