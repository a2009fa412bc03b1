import sys

from ping_pong.gui.game_app import main

sys.exit(main())
