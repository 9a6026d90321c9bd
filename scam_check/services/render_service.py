from html import escape

from ..models.verdict import ScamVerdict

CATEGORY_LABELS: dict[str, str] = {
    "urgency": "緊急性を煽る表現が検出されました",
    "moneyRequest": "金銭の要求が検出されました",
    "personalInfo": "個人情報の要求が検出されました",
    "unnaturalInvitation": "不自然な勧誘表現が検出されました",
    "fearAppeal": "不安を煽る表現が検出されました",
    "suspiciousUrl": "不審なURLが検出されました",
    "suspiciousSender": "不審な送信元が検出されました",
    "otherRisks": "その他の危険な要素が検出されました",
}

CAUTION_NOTICE = (
    "このコンテンツは詐欺の可能性が高いです。個人情報や金銭を要求されている場合は応じないでください。"
    "不審なメールやメッセージは、該当する組織の公式連絡先に確認することをお勧めします。"
)


def verdict_headline(verdict: ScamVerdict) -> str:
    if verdict.is_scam:
        return f"詐欺の可能性が高いです ({round(verdict.confidence * 100)}% の確率)"
    return f"詐欺の可能性は低いです ({round((1 - verdict.confidence) * 100)}% の確率)"


def _detected_categories(verdict: ScamVerdict) -> list[tuple[str, list[str]]]:
    return [
        (CATEGORY_LABELS[key], detail.examples)
        for key, detail in verdict.details.items()
        if detail.detected
    ]


def render_html(verdict: ScamVerdict) -> str:
    css_class = "verdict scam" if verdict.is_scam else "verdict safe"
    parts = [f'<section class="{css_class}">', f"<h2>{escape(verdict_headline(verdict))}</h2>"]

    parts.append("<p><strong>分析結果:</strong></p><ul>")
    parts.extend(f"<li>{escape(reason)}</li>" for reason in verdict.reasons)
    parts.append("</ul>")

    detected = _detected_categories(verdict)
    if detected:
        parts.append("<p><strong>詳細な分析:</strong></p><ul>")
        for label, examples in detected:
            parts.append(f"<li><span>{escape(label)}</span><ul>")
            parts.extend(f"<li>{escape(example)}</li>" for example in examples)
            parts.append("</ul></li>")
        parts.append("</ul>")

    if verdict.is_scam:
        parts.append(f'<div class="notice"><p><strong>注意事項:</strong></p><p>{escape(CAUTION_NOTICE)}</p></div>')

    parts.append("</section>")
    return "\n".join(parts)


def render_text(verdict: ScamVerdict) -> str:
    lines = [verdict_headline(verdict), "", "分析結果:"]
    lines.extend(f"  - {reason}" for reason in verdict.reasons)

    detected = _detected_categories(verdict)
    if detected:
        lines += ["", "詳細な分析:"]
        for label, examples in detected:
            lines.append(f"  * {label}")
            lines.extend(f"      - {example}" for example in examples)

    if verdict.is_scam:
        lines += ["", "注意事項:", f"  {CAUTION_NOTICE}"]

    return "\n".join(lines)
