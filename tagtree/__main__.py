# encoding=utf-8
import os
import time

import tagtree.main


if __name__ == '__main__':
    if os.environ.get('RUN_PROFILE'):
        import cProfile
        cProfile.run(
            'tagtree.main.main()',
            'stats-{0}.profile'.format(int(time.time()))
        )
    else:
        tagtree.main.main()
