"""Discovery of YAML pattern definition files."""
