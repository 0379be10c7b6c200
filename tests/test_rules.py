"""Tests for the rule modules — core rules, extended sections, totality."""

import pytest
from palette_checker.analysis import palette_analyze
from palette_checker.core.cases import build_cases
from palette_checker.core.colour import hex_to_hsl, hsl_to_hex
from palette_checker.core.types import Severity, Verdict
from palette_checker.registry import discover, get

PALETTES = [
    ['#000000', '#FFFFFF'],
    ['#000000', '#010101', '#FFFFFF'],
    ['#336699', '#336699', '#336699'],
    ['#6366F1', '#8B5CF6', '#EC4899', '#F59E0B'],
    ['#1E293B', '#64748B', '#F43F5E', '#CBD5E1', '#F8FAFC'],
    ['#FF0000', '#00FF00', '#0000FF', '#FFFF00', '#00FFFF', '#FF00FF'],
    ['#FFBE98', '#E0B589', '#6F7E6C', '#D6C5C9', '#2E4A67', '#FFFFFF', '#000000'],
    ['#111111', '#222222', '#333333', '#444444', '#555555', '#666666', '#777777', '#888888'],
]


def run(name, colours):
    return get(name).evaluate(colours, build_cases(colours))


class TestAdjacentContrast:
    def test_scenario_a(self):
        issues = run('adjacent-contrast', ['#000000', '#010101', '#FFFFFF'])
        assert [i.affected for i in issues] == [(0, 1)]
        assert issues[0].severity is Severity.WARNING
        assert issues[0].ratio < 1.5

    def test_three_solutions(self):
        issue = run('adjacent-contrast', ['#000000', '#010101', '#FFFFFF'])[0]
        assert [s.label for s in issue.solutions] == [
            'Oscurecer segundo color',
            'Aclarar primer color',
            'Cambiar tono del segundo',
        ]

    def test_lighten_first_respects_ceiling(self):
        issue = run('adjacent-contrast', ['#F0F0F0', '#FFFFFF'])[0]
        lighter = issue.solutions[1].preview[0]
        assert hex_to_hsl(lighter).l <= 90.5

    def test_high_contrast_palette_is_clean(self):
        assert run('adjacent-contrast', ['#000000', '#FFFFFF', '#000000']) == []


class TestGlobalAccessibility:
    def test_scenario_a_does_not_fire(self):
        assert run('global-accessibility', ['#000000', '#010101', '#FFFFFF']) == []

    def test_mid_tones_fire(self):
        issues = run('global-accessibility', ['#6366F1', '#8B5CF6', '#EC4899'])
        assert len(issues) == 1
        assert issues[0].severity is Severity.ERROR
        assert issues[0].kind == 'accessibility'

    def test_darken_fix_lowers_lightness(self):
        colours = ['#6366F1', '#8B5CF6', '#EC4899']
        issue = run('global-accessibility', colours)[0]
        darkest = issue.affected[0]
        darker = issue.solutions[0].preview[darkest]
        assert hex_to_hsl(darker).l < hex_to_hsl(colours[darkest]).l


class TestSimilarity:
    def test_scenario_b(self):
        colours = ['#336699', '#336699', '#336699']
        similar = run('similarity', colours)
        contrast = run('adjacent-contrast', colours)
        assert [i.affected for i in similar] == [(0, 2)]
        assert [i.affected for i in contrast] == [(0, 1), (1, 2)]

    def test_adjacent_pairs_ignored(self):
        assert run('similarity', ['#336699', '#336699']) == []

    def test_lightness_pushed_away_from_middle(self):
        issue = run('similarity', ['#CCCCCC', '#000000', '#CCCCCC'])[0]
        after = issue.solutions[1].preview[2]
        assert hex_to_hsl(after).l == pytest.approx(hex_to_hsl('#CCCCCC').l - 25, abs=1)


class TestSaturationBalance:
    def test_scenario_c(self):
        colours = [hsl_to_hex(210, s, 50) for s in (90, 10, 85, 12)]
        issues = run('saturation-balance', colours)
        assert len(issues) == 1
        issue = issues[0]
        assert issue.kind == 'balance'
        assert issue.severity is Severity.SUGGESTION

        sats = [hex_to_hsl(c).s for c in colours]
        mean = sum(sats) / len(sats)
        assert mean == pytest.approx(49.25, abs=1)

        balanced = next(s for s in issue.solutions if s.label == 'Equilibrar saturación')
        for colour in balanced.apply():
            assert hex_to_hsl(colour).s == pytest.approx(mean, abs=1)

    def test_soften_extremes_moves_halfway(self):
        colours = [hsl_to_hex(210, s, 50) for s in (90, 10, 85, 12)]
        issue = run('saturation-balance', colours)[0]
        softened = issue.solutions[1].apply()
        assert hex_to_hsl(softened[0]).s == pytest.approx((90 + 49.25) / 2, abs=1.5)

    def test_uniform_saturation_is_clean(self):
        assert run('saturation-balance', [hsl_to_hex(h, 60, 50) for h in (0, 90, 180)]) == []


class TestHarmonyOutlier:
    def test_outlier_found(self):
        colours = [hsl_to_hex(h, 60, 50) for h in (200, 210, 220, 120)]
        issues = run('harmony-outlier', colours)
        assert [i.affected for i in issues] == [(3,)]

    def test_integrate_moves_hue_to_mean(self):
        colours = [hsl_to_hex(h, 60, 50) for h in (200, 210, 220, 120)]
        issue = run('harmony-outlier', colours)[0]
        mean = sum(hex_to_hsl(c).h for c in colours) / 4
        assert hex_to_hsl(issue.solutions[0].preview[3]).h == pytest.approx(mean, abs=2)

    def test_wide_spread_is_clean(self):
        colours = [hsl_to_hex(h, 60, 50) for h in (0, 120, 240)]
        assert run('harmony-outlier', colours) == []


class TestReadability:
    def test_sixteen_records(self):
        issues = run('readability', ['#6366F1', '#8B5CF6', '#EC4899', '#F59E0B', '#10B981'])
        assert len(issues) == 16
        assert {i.case_id for i in issues} == {'case1', 'case2', 'case3', 'case4'}
        assert all(isinstance(i.severity, Verdict) for i in issues)

    def test_critical_has_fix_towards_seven(self):
        issues = run('readability', ['#333333', '#444444', '#555555', '#666666'])
        critical = [i for i in issues if i.severity is Verdict.CRITICAL and i.solutions]
        assert critical
        for issue in critical:
            assert len(issue.solutions[0].preview) == 4

    def test_glare_softens_palette_text(self):
        # case 1: text colour 2 on the white Boubba button
        colours = ['#336699', '#000000', '#FFFFFF']
        issue = next(i for i in run('readability', colours) if i.id == 'readability-case1-text_boubba')
        assert issue.severity is Verdict.GLARE
        assert issue.ratio > 18
        assert issue.affected == (1,)
        [solution] = issue.solutions
        assert solution.label == 'Suavizar contraste'
        assert solution.preview == ('#336699', '#1E1E1E', '#FFFFFF')

    def test_glare_with_fixed_text_has_no_fix(self):
        # case 3 puts fixed near-black text on colour 1
        colours = ['#FFFFFF', '#336699', '#994433']
        issue = next(i for i in run('readability', colours) if i.id == 'readability-case3-text_main')
        assert issue.severity is Verdict.GLARE
        assert issue.affected == (0,)
        assert issue.solutions == ()


class TestExtendedSections:
    def test_emotions_mixed_temperature(self):
        issues = run('emotions', ['#FF0000', '#0000FF'])
        temperature = next(i for i in issues if i.id == 'emotions-temperature')
        assert temperature.severity is Verdict.WARNING
        assert temperature.solutions[0].label == 'Armonizar temperaturas'

    def test_colour_blindness_identical_colours(self):
        issues = run('colour-blindness', ['#336699', '#336699'])
        assert len(issues) == 3
        assert all(i.severity is Verdict.WARNING for i in issues)

    def test_harmony_complementary(self):
        issues = run('harmony-relations', ['#FF0000', '#00FFFF'])
        assert [i.id for i in issues] == ['harmony-complementary']

    def test_harmony_analogous(self):
        # hues 0 and 20
        issues = run('harmony-relations', ['#FF0000', '#FF5500'])
        assert [i.id for i in issues] == ['harmony-analogous']
        assert issues[0].severity is Verdict.OPTIMAL
        assert issues[0].affected == (0, 1)

    def test_harmony_triadic(self):
        issues = run('harmony-relations', ['#FF0000', '#00FF00', '#0000FF'])
        assert [i.id for i in issues] == ['harmony-triadic']
        assert issues[0].affected == (0, 1, 2)
        assert issues[0].title == 'Armonía triádica'

    def test_attention_focal_on_accent(self):
        issues = run('attention', ['#808080', '#808080', '#FF0000'])
        assert issues[0].severity is Verdict.OPTIMAL

    def test_attention_misplaced_focal_point(self):
        issues = run('attention', ['#FF0000', '#808080', '#808080'])
        assert issues[0].title == 'Punto focal en posición incorrecta'
        assert issues[0].affected == (0, 2)

    def test_attention_uniform_weight(self):
        issues = run('attention', ['#808080', '#7F7F7F', '#818181'])
        assert [i.id for i in issues] == ['attention-uniform']
        issue = issues[0]
        assert issue.severity is Verdict.WARNING
        assert issue.title == 'Peso visual uniforme'
        assert issue.affected == (0, 1, 2)
        [solution] = issue.solutions
        assert solution.label == 'Crear punto focal'
        assert solution.preview[:2] == ('#808080', '#7F7F7F')
        focal = hex_to_hsl(solution.preview[2])
        assert focal.s == pytest.approx(85, abs=1)
        assert focal.l == pytest.approx(50, abs=1)

    def test_cultural_is_informational(self):
        issues = run('cultural', ['#2563EB', '#F8FAFC'])
        assert issues[0].severity is Verdict.INFO

    def test_memory_low_saturation(self):
        issues = run('memory', ['#999999', '#AAAAAA'])
        assert issues[0].severity is Verdict.WARNING
        assert issues[0].solutions

    def test_trends(self):
        assert run('trends', ['#FFBE98', '#000000'])[0].id == 'trends-alignment'
        assert run('trends', ['#FF0000', '#0000FF'])[0].severity is Verdict.INFO

    def test_trends_pastel(self):
        # soft sage and slate, both over 100 away from every trend colour
        issues = run('trends', ['#8CBFA6', '#8CA6BF'])
        assert [i.id for i in issues] == ['trends-pastel']
        assert issues[0].severity is Verdict.OPTIMAL
        assert issues[0].affected == (0, 1)

    def test_trends_timeless_affects_nothing(self):
        [issue] = run('trends', ['#FF0000', '#0000FF'])
        assert issue.id == 'trends-timeless'
        assert issue.affected == ()


class TestTotality:
    def test_all_rules_registered(self):
        assert len(discover()) == 13

    @pytest.mark.parametrize('colours', PALETTES)
    def test_indices_and_previews_valid(self, colours):
        for issue in palette_analyze(colours, 'all'):
            assert all(0 <= i < len(colours) for i in issue.affected), issue.id
            for solution in issue.solutions:
                assert len(solution.preview) == len(colours)
                assert solution.apply() == list(solution.preview)
                assert solution.apply() == solution.apply()

    def test_single_colour_yields_nothing(self):
        assert palette_analyze(['#336699'], 'all') == []
