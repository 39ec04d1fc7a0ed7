# Shared numeric, date and geometry helpers
