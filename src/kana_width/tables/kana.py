"""Kana table: halfwidth katakana, fullwidth katakana and hiragana.

Voiced syllables come first so that a two-codepoint halfwidth sequence such as
``ｶﾞ`` is registered before its one-codepoint prefix ``ｶ``. ヷ and ヺ have no
hiragana form.
"""

from __future__ import annotations

from types import MappingProxyType

from kana_width.models import KanaRow
from kana_width.tables.base import EquivalenceTable


def _voiced(
    hankaku: str,
    zenkaku: str,
    hiragana: str,
    hankaku_base: str,
    zenkaku_base: str,
    hiragana_base: str,
) -> KanaRow:
    return KanaRow(hankaku, zenkaku, hiragana, hankaku_base, zenkaku_base, hiragana_base)


def _plain(hankaku: str, zenkaku: str, hiragana: str) -> KanaRow:
    return KanaRow(hankaku, zenkaku, hiragana, hankaku, zenkaku, hiragana)


KANA = EquivalenceTable(
    name="kana",
    row_type=KanaRow,
    rows=(
        _voiced("ｶﾞ", "ガ", "が", "ｶ", "カ", "か"),
        _voiced("ｷﾞ", "ギ", "ぎ", "ｷ", "キ", "き"),
        _voiced("ｸﾞ", "グ", "ぐ", "ｸ", "ク", "く"),
        _voiced("ｹﾞ", "ゲ", "げ", "ｹ", "ケ", "け"),
        _voiced("ｺﾞ", "ゴ", "ご", "ｺ", "コ", "こ"),
        _voiced("ｻﾞ", "ザ", "ざ", "ｻ", "サ", "さ"),
        _voiced("ｼﾞ", "ジ", "じ", "ｼ", "シ", "し"),
        _voiced("ｽﾞ", "ズ", "ず", "ｽ", "ス", "す"),
        _voiced("ｾﾞ", "ゼ", "ぜ", "ｾ", "セ", "せ"),
        _voiced("ｿﾞ", "ゾ", "ぞ", "ｿ", "ソ", "そ"),
        _voiced("ﾀﾞ", "ダ", "だ", "ﾀ", "タ", "た"),
        _voiced("ﾁﾞ", "ヂ", "ぢ", "ﾁ", "チ", "ち"),
        _voiced("ﾂﾞ", "ヅ", "づ", "ﾂ", "ツ", "つ"),
        _voiced("ﾃﾞ", "デ", "で", "ﾃ", "テ", "て"),
        _voiced("ﾄﾞ", "ド", "ど", "ﾄ", "ト", "と"),
        _voiced("ﾊﾞ", "バ", "ば", "ﾊ", "ハ", "は"),
        _voiced("ﾋﾞ", "ビ", "び", "ﾋ", "ヒ", "ひ"),
        _voiced("ﾌﾞ", "ブ", "ぶ", "ﾌ", "フ", "ふ"),
        _voiced("ﾍﾞ", "ベ", "べ", "ﾍ", "ヘ", "へ"),
        _voiced("ﾎﾞ", "ボ", "ぼ", "ﾎ", "ホ", "ほ"),
        _voiced("ﾊﾟ", "パ", "ぱ", "ﾊ", "ハ", "は"),
        _voiced("ﾋﾟ", "ピ", "ぴ", "ﾋ", "ヒ", "ひ"),
        _voiced("ﾌﾟ", "プ", "ぷ", "ﾌ", "フ", "ふ"),
        _voiced("ﾍﾟ", "ペ", "ぺ", "ﾍ", "ヘ", "へ"),
        _voiced("ﾎﾟ", "ポ", "ぽ", "ﾎ", "ホ", "ほ"),
        _voiced("ｳﾞ", "ヴ", "ゔ", "ｳ", "ウ", "う"),
        _voiced("ﾜﾞ", "ヷ", "", "ﾜ", "ワ", "わ"),
        _voiced("ｦﾞ", "ヺ", "", "ｦ", "ヲ", "を"),
        _plain("ｱ", "ア", "あ"),
        _plain("ｲ", "イ", "い"),
        _plain("ｳ", "ウ", "う"),
        _plain("ｴ", "エ", "え"),
        _plain("ｵ", "オ", "お"),
        _plain("ｶ", "カ", "か"),
        _plain("ｷ", "キ", "き"),
        _plain("ｸ", "ク", "く"),
        _plain("ｹ", "ケ", "け"),
        _plain("ｺ", "コ", "こ"),
        _plain("ｻ", "サ", "さ"),
        _plain("ｼ", "シ", "し"),
        _plain("ｽ", "ス", "す"),
        _plain("ｾ", "セ", "せ"),
        _plain("ｿ", "ソ", "そ"),
        _plain("ﾀ", "タ", "た"),
        _plain("ﾁ", "チ", "ち"),
        _plain("ﾂ", "ツ", "つ"),
        _plain("ﾃ", "テ", "て"),
        _plain("ﾄ", "ト", "と"),
        _plain("ﾅ", "ナ", "な"),
        _plain("ﾆ", "ニ", "に"),
        _plain("ﾇ", "ヌ", "ぬ"),
        _plain("ﾈ", "ネ", "ね"),
        _plain("ﾉ", "ノ", "の"),
        _plain("ﾊ", "ハ", "は"),
        _plain("ﾋ", "ヒ", "ひ"),
        _plain("ﾌ", "フ", "ふ"),
        _plain("ﾍ", "ヘ", "へ"),
        _plain("ﾎ", "ホ", "ほ"),
        _plain("ﾏ", "マ", "ま"),
        _plain("ﾐ", "ミ", "み"),
        _plain("ﾑ", "ム", "む"),
        _plain("ﾒ", "メ", "め"),
        _plain("ﾓ", "モ", "も"),
        _plain("ﾔ", "ヤ", "や"),
        _plain("ﾕ", "ユ", "ゆ"),
        _plain("ﾖ", "ヨ", "よ"),
        _plain("ﾗ", "ラ", "ら"),
        _plain("ﾘ", "リ", "り"),
        _plain("ﾙ", "ル", "る"),
        _plain("ﾚ", "レ", "れ"),
        _plain("ﾛ", "ロ", "ろ"),
        _plain("ﾜ", "ワ", "わ"),
        _plain("ｦ", "ヲ", "を"),
        _plain("ﾝ", "ン", "ん"),
        _plain("ｧ", "ァ", "ぁ"),
        _plain("ｨ", "ィ", "ぃ"),
        _plain("ｩ", "ゥ", "ぅ"),
        _plain("ｪ", "ェ", "ぇ"),
        _plain("ｫ", "ォ", "ぉ"),
        _plain("ｯ", "ッ", "っ"),
        _plain("ｬ", "ャ", "ゃ"),
        _plain("ｭ", "ュ", "ゅ"),
        _plain("ｮ", "ョ", "ょ"),
    ),
    no_dakuten_columns=MappingProxyType(
        {
            "hankaku_katakana": "hankaku_katakana_no_dakuten",
            "zenkaku_katakana": "zenkaku_katakana_no_dakuten",
            "hiragana": "hiragana_no_dakuten",
        }
    ),
)
