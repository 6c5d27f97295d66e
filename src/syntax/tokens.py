"""
Literal token spellings used when shell syntax trees are turned back into text.

Members that share a spelling (e.g. `<` as a redirection and as a comparison)
are enum aliases of each other; printing only ever looks at the spelling.
"""

from __future__ import annotations

from enum import Enum


class Token(str, Enum):
    # reserved words
    IF = "if"
    THEN = "then"
    ELIF = "elif"
    ELSE = "else"
    FI = "fi"
    WHILE = "while"
    UNTIL = "until"
    DO = "do"
    DONE = "done"
    FOR = "for"
    IN = "in"
    CASE = "case"
    ESAC = "esac"
    FUNCTION = "function"
    LOCAL = "local"
    DECLARE = "declare"
    LET = "let"
    EVAL = "eval"

    # delimiters
    SEMICOLON = ";"
    DSEMICOLON = ";;"
    AND = "&"
    NOT = "!"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACK = "["
    RBRACK = "]"
    DOLLAR = "$"
    HASH = "#"
    QUO = "/"
    SQUOTE = "'"
    DQUOTE = '"'
    BQUOTE = "`"
    DOLLSQ = "$'"
    DOLLDQ = '$"'
    CMDIN = "<("

    # redirections
    RDRIN = "<"
    RDROUT = ">"
    APPEND = ">>"
    RDRINOUT = "<>"
    DPLOUT = ">&"
    DPLIN = "<&"
    SHL = "<<"
    DHEREDOC = "<<-"
    WHEREDOC = "<<<"
    RDRALL = "&>"
    APPALL = "&>>"
    CLBOUT = ">|"

    # parameter expansion operators
    COLMINUS = ":-"
    MINUS = "-"
    COLASSIGN = ":="
    ASSIGN = "="
    COLQUEST = ":?"
    QUEST = "?"
    COLPLUS = ":+"
    PLUS = "+"
    DHASH = "##"
    DREM = "%%"
    REM = "%"
    DXOR = "^^"
    XOR = "^"
    DCOMMA = ",,"
    COMMA = ","

    # arithmetic operators
    TILDE = "~"
    INC = "++"
    DEC = "--"
    MUL = "*"
    POW = "**"
    EQL = "=="
    NEQ = "!="
    LSS = "<"
    LEQ = "<="
    GTR = ">"
    GEQ = ">="
    LAND = "&&"
    LOR = "||"
    OR = "|"
    SHR = ">>"
    COLON = ":"
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="
    MUL_ASSIGN = "*="
    QUO_ASSIGN = "/="
    REM_ASSIGN = "%="
    AND_ASSIGN = "&="
    OR_ASSIGN = "|="
    XOR_ASSIGN = "^="
    SHL_ASSIGN = "<<="
    SHR_ASSIGN = ">>="

    def __str__(self) -> str:
        return self.value


__all__ = ["Token"]
