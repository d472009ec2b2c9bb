"""Django project package for the task alert service."""
