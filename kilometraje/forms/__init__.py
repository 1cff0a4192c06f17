from kilometraje.forms.expense_form import ExpenseForm

__all__ = ["ExpenseForm"]
