"""glassflow test-suite."""
from . import (test_glassflow_composition, test_glassflow_figures, test_glassflow_flow,
               test_glassflow_model, test_glassflow_parameters, test_glassflow_plotting,
               test_glassflow_regression, test_glassflow_vft)

__all__ = [
    "test_glassflow_composition",
    "test_glassflow_figures",
    "test_glassflow_flow",
    "test_glassflow_model",
    "test_glassflow_parameters",
    "test_glassflow_plotting",
    "test_glassflow_regression",
    "test_glassflow_vft",
]
