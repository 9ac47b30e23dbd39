# -*- coding: utf-8 -*-

# Copyright: (c) 2025, tfc-dispatch contributors
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

from tfc_dispatch.commands import main

if __name__ == '__main__':
    main()
