"""Core modules: settings, prompt assembly and logging."""
