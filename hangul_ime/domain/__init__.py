"""Qt-free composition domain: tables, composer and transition functions."""
