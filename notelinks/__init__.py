"""notelinks - pagination link checker for static HTML note pages."""
