import logging

from netgame.core.constants import BLACK, WHITE, SYMBOLS
from netgame.core.settings import settings
from netgame.engine.player import MachinePlayer
from netgame.models.enums import MoveKind
from netgame.schemas.move_schema import Move

def parse_move(text: str, kind: MoveKind) -> Move:
    """'x y' for an add move, 'x1 y1 x2 y2' (to, from) for a step move."""
    numbers = [int(n) for n in text.split()]
    if kind == MoveKind.ADD and len(numbers) == 2:
        return Move.add(*numbers)
    if kind == MoveKind.STEP and len(numbers) == 4:
        return Move.step(*numbers)
    raise ValueError(f"Expected {'2' if kind == MoveKind.ADD else '4'} numbers")

def main():
    logging.basicConfig(level=settings.get().log_level)

    print("=======================================")
    print("   NETWORK: Human (W) vs Machine (B)")
    print("=======================================")

    # Human plays White and moves first; the machine keeps the board
    machine = MachinePlayer(BLACK)
    human_turn = True

    print(machine.board)

    while not machine.has_won_game(WHITE) and not machine.has_won_game(BLACK):

        # --- Human Turn (White) ---
        if human_turn:
            kind = machine.next_move_type(WHITE)
            prompt = "x y" if kind == MoveKind.ADD else "to_x to_y from_x from_y"
            try:
                move = parse_move(input(f"\nYour {kind} move ({prompt}): "), kind)
            except ValueError as e:
                print(f"Invalid input: {e}")
                continue

            if not machine.opponent_move(move):
                print("Illegal move. Try again.")
                continue

        # --- Machine Turn (Black) ---
        else:
            print("\nMachine is thinking...")
            move = machine.choose_move()
            if move.is_quit():
                print("Machine has no legal move.")
                break
            print(f"Machine plays {move} ({machine.nodes} positions searched)")

        human_turn = not human_turn

        # Show Board
        print("\n" + str(machine.board))

    # --- End Game ---
    # If one move completed both networks, the side that made it wins
    sides = [(WHITE, "Human"), (BLACK, "Machine")]
    if human_turn:
        sides.reverse()
    for color, name in sides:
        if machine.has_won_game(color):
            print(f"\nGame Over! Winner: {name} ({SYMBOLS[color]})")
            break

if __name__ == "__main__":
    main()
