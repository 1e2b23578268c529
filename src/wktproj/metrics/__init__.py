from .tolerance import assert_points_almost_equal, calculate_deviation_stats, points_almost_equal
