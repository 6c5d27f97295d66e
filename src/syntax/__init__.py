"""Shell syntax tree nodes and the token spellings they print with."""

from .nodes import (
    ArithmExpr,
    ArithmNode,
    ArrayExpr,
    Assign,
    BinaryExpr,
    Block,
    CaseStmt,
    CmdInput,
    CmdSubst,
    Command,
    Cond,
    CStyleCond,
    CStyleLoop,
    DeclStmt,
    Elif,
    EvalStmt,
    Expansion,
    File,
    ForStmt,
    FuncDecl,
    IfStmt,
    Index,
    LetStmt,
    Lit,
    Loop,
    Node,
    ParamExp,
    ParenExpr,
    PatternList,
    Quoted,
    Redir,
    Replace,
    SglQuoted,
    Stmt,
    StmtCond,
    Subshell,
    UnaryExpr,
    UntilStmt,
    WhileStmt,
    Word,
    WordIter,
    WordPart,
)
from .tokens import Token

__all__ = [
    "ArithmExpr",
    "ArithmNode",
    "ArrayExpr",
    "Assign",
    "BinaryExpr",
    "Block",
    "CStyleCond",
    "CStyleLoop",
    "CaseStmt",
    "CmdInput",
    "CmdSubst",
    "Command",
    "Cond",
    "DeclStmt",
    "Elif",
    "EvalStmt",
    "Expansion",
    "File",
    "ForStmt",
    "FuncDecl",
    "IfStmt",
    "Index",
    "LetStmt",
    "Lit",
    "Loop",
    "Node",
    "ParamExp",
    "ParenExpr",
    "PatternList",
    "Quoted",
    "Redir",
    "Replace",
    "SglQuoted",
    "Stmt",
    "StmtCond",
    "Subshell",
    "Token",
    "UnaryExpr",
    "UntilStmt",
    "WhileStmt",
    "Word",
    "WordIter",
    "WordPart",
]
