import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hilbert_engine.algo.grammar import (
    PROD_A, PROD_B, START_SYMBOL, SYM_FORWARD, SYM_SUB_A, SYM_SUB_B, production,
)

def expand(symbols, generations):
    # Reference expansion that materializes the whole string
    for _ in range(generations):
        symbols = ''.join(production(s) or s for s in symbols)
    return symbols

class TestGrammar(unittest.TestCase):
    def test_productions(self):
        self.assertEqual(production(SYM_SUB_A), "-BF+AFA+FB-")
        self.assertEqual(production(SYM_SUB_B), "+AF-BFB-FA+")
        self.assertIsNone(production(SYM_FORWARD))
        self.assertIsNone(production('-'))
        self.assertEqual(START_SYMBOL, SYM_SUB_A)

    def test_alphabet(self):
        for prod in (PROD_A, PROD_B):
            self.assertTrue(set(prod) <= set("AB+-F"))
            self.assertEqual(prod.count(SYM_FORWARD), 3)

    def test_forward_count_per_order(self):
        # An order-n curve has 4^n cells joined by 4^n - 1 moves
        for order in range(1, 6):
            self.assertEqual(expand(START_SYMBOL, order).count(SYM_FORWARD), 4 ** order - 1)

if __name__ == '__main__':
    unittest.main()
