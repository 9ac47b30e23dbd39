#!/usr/bin/env python3
"""
Tests for the package layout and source conventions.
"""

import glob
import os
import tokenize
import unittest

PACKAGE_DIR = os.path.join(os.path.dirname(__file__), '..', 'tfc_dispatch')

COPYRIGHT = '# Copyright: (c) 2025, tfc-dispatch contributors'
LICENSE = '# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)'

STRING_TOKENS = {tokenize.STRING, getattr(tokenize, 'FSTRING_START', tokenize.STRING)}


def source_files():
    return sorted(glob.glob(os.path.join(PACKAGE_DIR, '*.py')))


class TestModuleStructure(unittest.TestCase):
    """Test the overall module structure"""

    def test_module_files_exist(self):
        """Test that all expected module files exist"""
        expected_modules = [
            '__init__.py',
            '__main__.py',
            'commands.py',
            'config.py',
            'dispatch.py',
            'logging.py',
            'terraform_base.py'
        ]

        for module_file in expected_modules:
            module_path = os.path.join(PACKAGE_DIR, module_file)
            self.assertTrue(os.path.exists(module_path), f'Module {module_file} not found')

    def test_license_header(self):
        """Every module starts with the project copyright and license"""
        for path in source_files():
            with open(path, encoding='utf-8') as f:
                header = f.read().splitlines()[:4]

            self.assertEqual(header[0], '# -*- coding: utf-8 -*-', path)
            self.assertEqual(header[2], COPYRIGHT, path)
            self.assertEqual(header[3], LICENSE, path)

    def test_single_quoted_strings(self):
        """Double quotes are reserved for docstrings and strings holding a single quote"""
        for path in source_files():
            with open(path, 'rb') as f:
                tokens = list(tokenize.tokenize(f.readline))

            for token in tokens:
                if token.type not in STRING_TOKENS:
                    continue
                literal = token.string.lstrip('rbfuRBFU')
                if literal.startswith('"""') or not literal.startswith('"'):
                    continue
                self.assertIn(
                    "'",
                    token.line,
                    f'{os.path.basename(path)}:{token.start[0]} uses double quotes'
                )


if __name__ == '__main__':
    unittest.main()
