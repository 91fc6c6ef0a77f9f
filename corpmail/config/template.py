"""Default configuration template.

This template is written to ~/.config/corpmail/config.toml
when running `corpmail config init`.
"""

CONFIG_TEMPLATE = """\
# corpmail configuration

[defaults]
# Mailbox capacity (in mb) given to new accounts
mail_capacity = 500
# Length of the generated initial password
password_length = 8

[storage]
# One JSON object per line, rewritten on every save
data_file = "~/.local/share/corpmail/accounts.jsonl"

[logging]
# DEBUG, INFO, WARNING or ERROR
level = "WARNING"
"""
