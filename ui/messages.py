from typing import Iterable

from models import (
    BreathingPattern,
    BreathingPhase,
    DailyStats,
    GREETING,
    Notification,
    Reminder
)
from ui.keyboards import REMINDER_TYPE_LABELS
from ui.progress import meals_progress_bar, mood_sparkline
from utils.text_utils import bold, escape_html, italic

PHASE_ICONS = {
    BreathingPhase.INHALE: "🟣",
    BreathingPhase.HOLD: "⏸",
    BreathingPhase.EXHALE: "⚪️",
    BreathingPhase.HOLD_POST: "⏳",
}

PHASE_DURATION = {
    BreathingPhase.INHALE: "inhale",
    BreathingPhase.HOLD: "hold",
    BreathingPhase.EXHALE: "exhale",
    BreathingPhase.HOLD_POST: "hold_post",
}

def welcome_message():
    return GREETING

def help_message():
    return (
        "🌿 <b>Como posso te ajudar</b>\n\n"
        "Escreva livremente para conversar comigo.\n\n"
        "/respirar - exercícios de respiração guiada\n"
        "/painel - seu painel de bem-estar\n"
        "/lembretes - lembretes diários\n"
        "/mudo - ligar/desligar a narração\n"
        "/foto - enviar com uma foto para trocar minha imagem\n"
        "/foto_padrao - voltar à foto original"
    )

def breathing_menu_message():
    return "🧘 <b>Escolha uma técnica de respiração</b>"

def breathing_phase_message(pattern: BreathingPattern, phase: BreathingPhase):
    seconds = getattr(pattern, PHASE_DURATION[phase]) // 1000
    return (
        f"🌬️ {bold(pattern.name)}\n"
        f"{italic(pattern.description)}\n\n"
        f"{PHASE_ICONS[phase]} {bold(phase.value)} · {seconds} s"
    )

def breathing_concluded_message(pattern: BreathingPattern, pauses: int):
    return (
        f"✅ {bold(pattern.name)} concluída.\n"
        f"Pausas conscientes registradas: <b>{pauses}</b>"
    )

def breathing_cancelled_message(pattern: BreathingPattern):
    return f"✖️ {bold(pattern.name)} interrompida."

def mood_trend_message(stats: DailyStats):
    if len(stats.mood_scores) < 2:
        return italic("Continue conversando para gerar tendência")
    return f"Início {mood_sparkline(stats.mood_scores)} Agora"

def dashboard_message(stats: DailyStats):
    total_meals = len(stats.meals)
    return (
        "📊 <b>Seu Painel de Bem-estar</b>\n\n"
        f"🙂 <b>Humor médio:</b> {stats.average_mood:.1f} {stats.mood_badge}\n"
        f"{mood_trend_message(stats)}\n\n"
        f"🌬️ <b>Pausas conscientes:</b> {stats.pauses}\n\n"
        f"🍴 <b>Refeições mindful:</b> {stats.mindful_meals_count} / {total_meals}\n"
        f"{meals_progress_bar(stats.mindful_meals_count, total_meals)}"
    )

def reminders_list_message(reminders: Iterable[Reminder]):
    reminders = list(reminders)
    if not reminders:
        return "⏰ <b>Meus Lembretes</b>\n\nNenhum lembrete configurado."
    lines = [
        f"{'🟢' if r.enabled else '⚪️'} {r.time} · {REMINDER_TYPE_LABELS[r.type]}"
        for r in reminders
    ]
    return "⏰ <b>Meus Lembretes</b>\n\n" + "\n".join(lines)

def reminder_time_prompt(reminder: Reminder):
    return (
        f"✏️ Novo horário para o lembrete das {bold(reminder.time)} (HH:mm):\n"
        f"{italic('Use /cancelar para desistir')}"
    )

def notification_message(notification: Notification):
    return f"{bold(notification.title)}\n{escape_html(notification.message)}"
