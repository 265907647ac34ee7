"""spendlog - personal expense tracker with monthly insights."""
