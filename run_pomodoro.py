import sys

from pomodoro_timer.app import main

if __name__ == '__main__':
    sys.exit(main())
