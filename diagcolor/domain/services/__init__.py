from diagcolor.domain.services.value_printer import ValuePrinter

__all__ = ["ValuePrinter"]
