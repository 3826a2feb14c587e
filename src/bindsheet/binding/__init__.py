from bindsheet.binding.applier import apply_rule, apply_sheet, bind_to

__all__ = ["apply_rule", "apply_sheet", "bind_to"]
