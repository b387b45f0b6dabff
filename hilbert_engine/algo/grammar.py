from typing import Optional

# Hilbert curve L-system symbols
SYM_END     = ''  # Read past the end of a production
SYM_SUB_A   = 'A'
SYM_SUB_B   = 'B'
SYM_FORWARD = 'F'
SYM_LEFT    = '-'
SYM_RIGHT   = '+'

NON_TERMINALS = (SYM_SUB_A, SYM_SUB_B)

PROD_A = "-BF+AFA+FB-"
PROD_B = "+AF-BFB-FA+"

START_SYMBOL = SYM_SUB_A

PRODUCTIONS = {
    SYM_SUB_A: PROD_A,
    SYM_SUB_B: PROD_B,
}

def production(symbol: str) -> Optional[str]:
    """Production string for a non-terminal, None for any other symbol."""
    return PRODUCTIONS.get(symbol)
