# minishlex

The front end of a small interactive shell. It turns a command line into
tokens, checks that they form a valid pipeline, and expands `$VARIABLES`.

## Modules

- `minishlex.tokens` holds the token model. `Token` is a dataclass with
  `value`, `type` (a `TokenType`) and `quote_type` (a `QuoteType`, default
  `QuoteType.NONE`). `TokenType` has `WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`,
  `REDIR_APPEND` and `REDIR_HEREDOC`; `TokenType.is_redirection()` is true
  for the four redirection types. `QuoteType` has `NONE`, `SINGLE` and
  `DOUBLE`.
- `minishlex.lexer.tokenize(text)` splits a line on spaces and tabs and
  recognises the operators `|`, `<`, `>`, `<<` and `>>`. Quoted parts
  (`'...'` and `"..."`) are joined to the text around them into one word,
  with the quotes removed. The token's `quote_type` records the last kind of
  quote seen in the word. A quote that is never closed raises `LexerError`.
  The helpers `is_whitespace`, `operator_length` and `operator_type` are
  also available; `operator_type` raises `LexerError` for a string that is
  not an operator.
- `minishlex.syntax.check_syntax(tokens)` rejects a pipe at the start or
  end, two pipes in a row, an empty command before a pipe, and a redirection
  not followed by a word. Each of these raises `ShellSyntaxError`; otherwise
  the tokens are returned unchanged.
- `minishlex.expansion` replaces `$NAME` (letters, digits and `_`) with its
  value from the mapping you pass as `env`, or from `os.environ` when `env`
  is `None`. A name that is not set, or a `$` with no name after it, expands
  to an empty string. `$?` always expands to the fixed string `"10"`.
  `perform_expansion` leaves single-quoted text as written;
  `expand_tokens` rewrites the `value` of each token in place;
  `expand_variable` expands one name starting just after a `$` and returns
  the value together with the position after the name.
- `minishlex.shell` has `find_path(command, path)`, which returns the first
  `dir/command` that exists in a `:`-separated path string (or `None`), and
  `format_tokens(tokens)`, which renders a token list as readable text.

## Example

```python
from minishlex.lexer import tokenize
from minishlex.syntax import check_syntax
from minishlex.expansion import expand_tokens
from minishlex.shell import format_tokens

tokens = tokenize("echo \"hello $USER\" | wc -c > out.txt")
check_syntax(tokens)
expand_tokens(tokens, {"USER": "alice"})
print(format_tokens(tokens))
```

prints

```
--- Tokens ---
Token 0: Type=WORD, Value=echo, Quote=NONE
Token 1: Type=WORD, Value=hello alice, Quote=DOUBLE
Token 2: Type=PIPE, Value=|, Quote=NONE
Token 3: Type=WORD, Value=wc, Quote=NONE
Token 4: Type=WORD, Value=-c, Quote=NONE
Token 5: Type=REDIR_OUT, Value=>, Quote=NONE
Token 6: Type=WORD, Value=out.txt, Quote=NONE
--------------
```

## Errors

Both error classes derive from `ValueError`.

```python
from minishlex.lexer import tokenize, LexerError
from minishlex.syntax import check_syntax, ShellSyntaxError

try:
    check_syntax(tokenize("| grep x"))
except ShellSyntaxError as exc:
    print(exc)  # Syntax error: unexpected token '|' at start

try:
    tokenize("echo 'unterminated")
except LexerError as exc:
    print(exc)  # Syntax Error: Unclosed quote
```

## What this package does not do

It has no interactive prompt and no command to run. It does not group
tokens into commands with their arguments and redirections, does not open
redirection files or read here-documents, and does not start programs;
`find_path` only locates an executable. Exit statuses are not tracked, so
`$?` is always `"10"`.

## Requirements

Python 3.10 or later. No third-party packages are needed at run time.