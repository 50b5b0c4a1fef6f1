"""Shared kernel: identifiers, money, timestamps, errors, events and the database."""