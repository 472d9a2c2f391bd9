from .json_template_catalog import JsonTemplateCatalog, DEFAULT_CATALOG_PATH, DEFAULT_TIPS_PATH

__all__ = ["JsonTemplateCatalog", "DEFAULT_CATALOG_PATH", "DEFAULT_TIPS_PATH"]
