# logic/parser/cli_syntax.py

# prefix vocabulary shared by every command parser

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_LEVEL = "l/"
PREFIX_CLASS_GROUP = "c/"
PREFIX_ASSIGNMENT = "a/"
PREFIX_REMARK = "r/"

ALL_PREFIXES: tuple[str, ...] = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_LEVEL,
    PREFIX_CLASS_GROUP,
    PREFIX_ASSIGNMENT,
    PREFIX_REMARK,
)
