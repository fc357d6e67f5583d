"""Language server for Flow (.flow) files."""
