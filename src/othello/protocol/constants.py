class Command:
    INIT = "INIT"
    NEWGAME = "NEWGAME"
    PLAY = "PLAY"       # PLAY <coord> (e.g., PLAY D3)
    UNDO = "UNDO"       # take back one move
    UNDOTURN = "UNDOTURN"  # take back to the last human turn
    BOARD = "BOARD"     # Request board state
    VALID_MOVES = "VALID_MOVES" # Request valid moves for the side to move
    HINT = "HINT"       # Request the suggested move for the side to move
    PLAYER = "PLAYER"   # PLAYER <side> <human|computer>
    QUIT = "QUIT"

class Response:
    READY = "READY"
    OK = "OK"
    MOVE = "MOVE"       # MOVE <side> <coord>
    PASS = "PASS"       # PASS <side>
    BOARD = "BOARD"     # BOARD <side to move or -> <state_string>
    VALID_MOVES = "VALID_MOVES" # VALID_MOVES <coord1> <coord2> ...
    HINT = "HINT"       # HINT <coord or ->
    THINKING = "THINKING"  # THINKING <side>
    ERROR = "ERROR"     # ERROR <msg>
    RESULT = "RESULT"   # RESULT <DARK|LIGHT|DRAW> <dark> <light>

class PlayerMode:
    HUMAN = "human"
    COMPUTER = "computer"

NO_VALUE = "-"
