import unittest

from connect_four_arcade.piece import Piece
from connect_four_arcade.scene import BLACK, BLUE, RED, WHITE, describe, window_size
from connect_four_arcade.session import CELL_SIZE, GameSession, Mode


class TestScene(unittest.TestCase):
    def test_window_fits_board_and_footer(self):
        self.assertEqual(window_size(GameSession()), (560, 580))

    def test_title_screen_shows_instructions(self):
        scene = describe(GameSession())
        self.assertEqual(scene.background, BLACK)
        self.assertEqual(scene.rects, [])
        self.assertEqual(
            [t.content for t in scene.texts],
            ["Connect Four", "Press '1' for Computer Mode", "Press '2' for Two Player Mode"],
        )
        self.assertTrue(all(t.centered and t.x == 280 for t in scene.texts))

    def test_board_cells_are_coloured_by_piece(self):
        session = GameSession()
        session.start(Mode.TWO_PLAYER)
        session.click(CELL_SIZE / 2, 10)
        session.click(CELL_SIZE / 2, 10)
        scene = describe(session)

        filled = {(r.x, r.y): r.color for r in scene.rects if not r.outline}
        outlines = [r for r in scene.rects if r.outline]
        self.assertEqual(len(filled), 42)
        self.assertEqual(len(outlines), 42)
        self.assertTrue(all(r.color == WHITE for r in outlines))
        self.assertEqual(filled[(0, 5 * CELL_SIZE)], RED)
        self.assertEqual(filled[(0, 4 * CELL_SIZE)], BLUE)
        self.assertEqual(filled[(CELL_SIZE, 5 * CELL_SIZE)], BLACK)

    def test_board_has_column_labels_in_the_footer(self):
        session = GameSession()
        session.start(Mode.COMPUTER)
        labels = describe(session).texts
        self.assertEqual([t.content for t in labels], [str(i) for i in range(1, 8)])
        self.assertTrue(all(t.y == 6 * CELL_SIZE + 10 for t in labels))

    def test_game_over_shows_the_winner(self):
        session = GameSession()
        session.start(Mode.TWO_PLAYER)
        session.finish(Piece.PLAYER_TWO)
        texts = describe(session).texts
        self.assertEqual([t.content for t in texts], ["Player 2 Wins!"])
        self.assertEqual((texts[0].x, texts[0].y), (280, 270))

    def test_game_over_shows_a_draw(self):
        session = GameSession()
        session.start(Mode.TWO_PLAYER)
        session.finish(None)
        self.assertEqual([t.content for t in describe(session).texts], ["Draw!"])


if __name__ == "__main__":
    unittest.main()
