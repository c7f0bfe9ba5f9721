KV = """
#:import BASE_BG receiver.config.constants.BASE_BG
#:import DARK_BG receiver.config.constants.DARK_BG
#:import DARK_BG2 receiver.config.constants.DARK_BG2
#:import PINK receiver.config.constants.PINK
#:import GREEN receiver.config.constants.GREEN
#:import PURPLE receiver.config.constants.PURPLE
#:import BLUE receiver.config.constants.BLUE
#:import GRAY receiver.config.constants.GRAY
#:import TEXT_PRIMARY receiver.config.constants.TEXT_PRIMARY
#:import TEXT_HINT receiver.config.constants.TEXT_HINT

<ScreenTitle@Label>:
    color: TEXT_PRIMARY
    bold: True
    font_size: "44sp"
    size_hint_y: None
    height: self.texture_size[1] + dp(10)
    halign: "center"

<Caption@Label>:
    color: TEXT_HINT
    font_size: "20sp"
    size_hint_y: None
    height: self.texture_size[1] + dp(6)
    halign: "center"
    text_size: self.width, None

<Card@BoxLayout>:
    bg_color: DARK_BG
    border_color: 0, 0, 0, 0
    orientation: "vertical"
    padding: dp(18)
    spacing: dp(8)
    canvas.before:
        Color:
            rgba: self.bg_color
        RoundedRectangle:
            pos: self.pos
            size: self.size
            radius: [dp(16)]
        Color:
            rgba: self.border_color
        Line:
            rounded_rectangle: (self.x, self.y, self.width, self.height, dp(16))
            width: 2

<SurfaceScreen>:
    canvas.before:
        Color:
            rgba: BASE_BG
        Rectangle:
            pos: self.pos
            size: self.size

<MessageScreen>:
    BoxLayout:
        orientation: "vertical"
        size_hint: 0.8, None
        height: self.minimum_height
        pos_hint: {"center_x": 0.5, "center_y": 0.5}
        spacing: dp(20)

        ScreenTitle:
            text: root.title
            font_size: "56sp"
            color: PINK
        Caption:
            text: root.subtitle

<LoadingScreen>:
    BoxLayout:
        orientation: "vertical"
        size_hint: 0.8, None
        height: self.minimum_height
        pos_hint: {"center_x": 0.5, "center_y": 0.5}
        spacing: dp(30)

        Widget:
            size_hint: None, None
            size: dp(90), dp(90)
            pos_hint: {"center_x": 0.5}
            canvas:
                Color:
                    rgba: DARK_BG
                Line:
                    circle: (self.center_x, self.center_y, dp(40))
                    width: dp(5)
                Color:
                    rgba: PURPLE
                Line:
                    circle: (self.center_x, self.center_y, dp(40), root.spinner_angle, root.spinner_angle + 90)
                    width: dp(5)

        ScreenTitle:
            text: root.surface.status
            font_size: "36sp"

<LobbyScreen>:
    BoxLayout:
        orientation: "vertical"
        padding: [dp(40), dp(30)]
        spacing: dp(16)

        ScreenTitle:
            text: root.surface.game_name or "Half-Wit"
            font_size: "52sp"
            color: PINK
        Caption:
            text: ("Hosted by " + root.surface.host_name) if root.surface.host_name else ""

        BoxLayout:
            orientation: "horizontal"
            size_hint: None, None
            size: dp(420), dp(40)
            pos_hint: {"center_x": 0.5}
            spacing: dp(20)
            Label:
                text: root.surface.player_count
                color: TEXT_PRIMARY
                bold: True
                font_size: "22sp"
            Label:
                text: root.surface.round_count
                color: TEXT_PRIMARY
                bold: True
                font_size: "22sp"

        ScrollView:
            do_scroll_x: False
            StackLayout:
                id: players_grid
                orientation: "lr-tb"
                size_hint_y: None
                height: self.minimum_height
                padding: [dp(20), dp(10)]
                spacing: dp(18)

        Caption:
            text: "Join on your phone to play!"

<CountdownScreen>:
    BoxLayout:
        orientation: "vertical"
        size_hint: 0.8, None
        height: self.minimum_height
        pos_hint: {"center_x": 0.5, "center_y": 0.5}
        spacing: dp(20)

        ScreenTitle:
            text: "Round " + root.surface.round_number + " of " + root.surface.total_rounds
        Label:
            text: root.surface.countdown
            color: PINK
            bold: True
            font_size: "140sp"
            size_hint_y: None
            height: self.texture_size[1]
        Caption:
            text: "Get ready..."

<AnsweringScreen>:
    BoxLayout:
        orientation: "vertical"
        padding: [dp(40), dp(40)]
        spacing: dp(24)

        ScreenTitle:
            text: "Round " + root.surface.round_number
        Caption:
            text: "Answer the prompts on your phone!"

        AnchorLayout:
            TimerCircle:
                size_hint: None, None
                size: dp(200), dp(200)
                seconds: root.surface.seconds
                urgency: root.surface.timer_urgency

        Label:
            text: root.surface.answers_received + "/" + root.surface.total_players + " answers in"
            color: TEXT_PRIMARY
            bold: True
            font_size: "26sp"
            size_hint_y: None
            height: dp(50)

<MatchupVotingScreen>:
    BoxLayout:
        orientation: "vertical"
        padding: [dp(40), dp(30)]
        spacing: dp(20)

        Caption:
            text: "Matchup " + root.surface.matchup_number + " of " + root.surface.total_matchups
        ScreenTitle:
            text: root.surface.prompt_text
            font_size: "34sp"
            text_size: self.width, None

        BoxLayout:
            orientation: "horizontal"
            spacing: dp(24)

            Card:
                border_color: PINK
                Label:
                    text: root.surface.answer1
                    color: TEXT_PRIMARY
                    bold: True
                    font_size: "28sp"
                    halign: "center"
                    valign: "middle"
                    text_size: self.size

            AnchorLayout:
                size_hint_x: None
                width: dp(200)
                TimerCircle:
                    size_hint: None, None
                    size: dp(160), dp(160)
                    seconds: root.surface.seconds
                    urgency: root.surface.timer_urgency

            Card:
                border_color: GREEN
                Label:
                    text: root.surface.answer2
                    color: TEXT_PRIMARY
                    bold: True
                    font_size: "28sp"
                    halign: "center"
                    valign: "middle"
                    text_size: self.size

        Label:
            text: root.surface.votes_received + "/" + root.surface.eligible_voters + " votes in"
            color: TEXT_PRIMARY
            bold: True
            font_size: "24sp"
            size_hint_y: None
            height: dp(44)

<ResultCard@Card>:
    result: None
    accent: PINK
    border_color: self.accent if self.result and self.result.winner else GRAY
    Label:
        text: root.result.answer if root.result else ""
        color: TEXT_PRIMARY
        bold: True
        font_size: "26sp"
        halign: "center"
        valign: "middle"
        text_size: self.size
    Label:
        text: root.result.player_name if root.result else ""
        color: root.accent
        bold: True
        font_size: "20sp"
        size_hint_y: None
        height: dp(30)
    Label:
        text: ("+" + root.result.points + "  (" + root.result.votes + " votes)") if root.result else ""
        color: TEXT_PRIMARY
        font_size: "20sp"
        size_hint_y: None
        height: dp(30)
    Label:
        text: "BONUS!"
        color: GREEN
        bold: True
        font_size: "18sp"
        size_hint_y: None
        height: dp(26) if root.result and root.result.bonus_visible else 0
        opacity: 1 if root.result and root.result.bonus_visible else 0

<MatchupResultsScreen>:
    BoxLayout:
        orientation: "vertical"
        padding: [dp(40), dp(30)]
        spacing: dp(20)

        ScreenTitle:
            text: root.surface.prompt_text
            font_size: "34sp"
            text_size: self.width, None

        BoxLayout:
            orientation: "horizontal"
            spacing: dp(30)

            BoxLayout:
                orientation: "vertical"
                spacing: dp(10)
                ResultCard:
                    result: root.surface.result1
                    accent: PINK
                VoterStrip:
                    id: voters1

            BoxLayout:
                orientation: "vertical"
                spacing: dp(10)
                ResultCard:
                    result: root.surface.result2
                    accent: GREEN
                VoterStrip:
                    id: voters2

        Card:
            size_hint_y: None
            height: dp(90) if root.surface.abstain_visible else 0
            opacity: 1 if root.surface.abstain_visible else 0
            border_color: PURPLE if root.surface.abstain_winner else GRAY
            orientation: "horizontal"
            Label:
                text: "Abstained"
                color: PURPLE if root.surface.abstain_winner else TEXT_HINT
                bold: True
                font_size: "20sp"
                size_hint_x: None
                width: dp(140)
            VoterStrip:
                id: abstain_voters

<RoundResultsScreen>:
    BoxLayout:
        orientation: "vertical"
        padding: [dp(60), dp(30)]
        spacing: dp(16)

        ScreenTitle:
            text: "Round " + root.surface.round_number + " Results"

        RelativeLayout:
            size_hint_y: None
            height: dp(36)
            Label:
                id: round_header
                text: "Round Scores"
                color: PINK
                bold: True
                font_size: "22sp"
            Label:
                id: total_header
                text: "Total Scores"
                color: TEXT_PRIMARY
                bold: True
                font_size: "22sp"
                opacity: 0

        AnchorLayout:
            anchor_y: "top"
            BoxLayout:
                id: entries_box
                orientation: "vertical"
                size_hint_y: None
                height: self.minimum_height
                spacing: dp(15)

<GameResultsScreen>:
    BoxLayout:
        orientation: "vertical"
        padding: [dp(60), dp(30)]
        spacing: dp(16)

        ScreenTitle:
            text: "Final Results"
            color: PINK
            font_size: "52sp"

        AnchorLayout:
            anchor_y: "top"
            BoxLayout:
                id: entries_box
                orientation: "vertical"
                size_hint_y: None
                height: self.minimum_height
                spacing: dp(15)

<TutorialStep@BoxLayout>:
    orientation: "vertical"
    size_hint: 0.85, 0.85
    pos_hint: {"center_x": 0.5, "center_y": 0.5}
    spacing: dp(24)
    opacity: 0

<TutorialScreen>:
    FloatLayout:
        TutorialStep:
            id: step1
            Widget:
            ScreenTitle:
                text: "Welcome to Half-Wit!"
                color: PINK
                font_size: "60sp"
            Widget:

        TutorialStep:
            id: step2
            Widget:
            ScreenTitle:
                text: "Here's how it works"
            Widget:

        TutorialStep:
            id: step3
            Widget:
            Label:
                text: root.surface.rounds_number
                color: PINK
                bold: True
                font_size: "120sp"
                size_hint_y: None
                height: self.texture_size[1]
            ScreenTitle:
                text: "Rounds"
            Widget:

        TutorialStep:
            id: step4
            ScreenTitle:
                text: "Answer two prompts on your phone"
                font_size: "36sp"
            Caption:
                text: "You have a " + root.surface.time_label + " timer"

            BoxLayout:
                orientation: "horizontal"
                spacing: dp(24)
                Card:
                    opacity: 1 if root.surface.prompt1_visible else 0
                    Label:
                        text: root.surface.prompt1_label
                        color: TEXT_HINT
                        bold: True
                        font_size: "20sp"
                        size_hint_y: None
                        height: dp(30)
                    Label:
                        canvas.before:
                            Color:
                                rgba: DARK_BG2
                            Rectangle:
                                pos: self.pos
                                size: self.size
                        text: root.surface.answer1_text if root.surface.answer1_has_text else "Type your answer..."
                        color: TEXT_PRIMARY if root.surface.answer1_has_text else TEXT_HINT
                        font_size: "22sp"
                Card:
                    opacity: 1 if root.surface.prompt2_visible else 0
                    Label:
                        text: root.surface.prompt2_label
                        color: TEXT_HINT
                        bold: True
                        font_size: "20sp"
                        size_hint_y: None
                        height: dp(30)
                    Label:
                        canvas.before:
                            Color:
                                rgba: DARK_BG2
                            Rectangle:
                                pos: self.pos
                                size: self.size
                        text: root.surface.answer2_text if root.surface.answer2_has_text else "Type your answer..."
                        color: TEXT_PRIMARY if root.surface.answer2_has_text else TEXT_HINT
                        font_size: "22sp"

            Card:
                size_hint: None, None
                size: dp(240), dp(64)
                pos_hint: {"center_x": 0.5}
                padding: dp(8)
                opacity: 0 if root.surface.submit_state == "hidden" else 1
                bg_color: BLUE if root.surface.submit_state == "enabled" else (GREEN if root.surface.submit_state == "submitted" else GRAY)
                Label:
                    text: "Submitted" if root.surface.submit_state == "submitted" else "Submit"
                    color: TEXT_PRIMARY
                    bold: True
                    font_size: "22sp"
            Caption:
                text: "Submitted!"
                color: GREEN
                opacity: 1 if root.surface.submitted_text_visible else 0

        TutorialStep:
            id: step5
            ScreenTitle:
                text: "Answers get matched up"
                font_size: "36sp"
            BoxLayout:
                orientation: "horizontal"
                spacing: dp(24)
                Card:
                    border_color: PINK
                    opacity: 1 if root.surface.vs_pink_visible else 0
                    Label:
                        text: "A clever answer!"
                        color: TEXT_PRIMARY
                        bold: True
                        font_size: "26sp"
                Label:
                    text: "VS"
                    color: PINK
                    bold: True
                    font_size: "48sp"
                    size_hint_x: None
                    width: dp(120)
                    opacity: 1 if root.surface.vs_text_visible else 0
                Card:
                    border_color: GREEN
                    opacity: 1 if root.surface.vs_green_visible else 0
                    Label:
                        text: "A witty response!"
                        color: TEXT_PRIMARY
                        bold: True
                        font_size: "26sp"
            Caption:
                text: "Everyone else votes for their favourite"

        TutorialStep:
            id: step6
            ScreenTitle:
                text: "Earn a point for every vote"
                font_size: "36sp"
            RelativeLayout:
                size_hint_y: None
                height: dp(90)
                Label:
                    text: "+1"
                    color: GREEN
                    bold: True
                    font_size: "56sp"
                    size_hint: None, None
                    size: self.texture_size
                    center_x: self.parent.width / 2
                    center_y: self.parent.height / 2 + root.plus_one_offset
                    opacity: root.plus_one_opacity
            Caption:
                text: "Win every vote to earn a bonus!"
                color: PINK
                opacity: 1 if root.surface.bonus_text_visible else 0
            RelativeLayout:
                size_hint_y: None
                height: dp(90)
                Label:
                    text: "+1"
                    color: PINK
                    bold: True
                    font_size: "56sp"
                    size_hint: None, None
                    size: self.texture_size
                    center_x: self.parent.width / 2
                    center_y: self.parent.height / 2 + root.bonus_offset
                    opacity: root.bonus_opacity
            RelativeLayout:
                size_hint_y: None
                height: dp(60)
                opacity: 1 if root.surface.remember_visible else 0
                Label:
                    text: "Remember: funny beats correct!"
                    color: TEXT_PRIMARY
                    bold: True
                    font_size: "28sp"
                    size_hint: None, None
                    size: self.texture_size
                    center_x: self.parent.width / 2 + root.shake_x
                    center_y: self.parent.height / 2

        TutorialStep:
            id: step7
            Widget:
            ScreenTitle:
                text: "Get Ready!"
                color: PINK
                font_size: "64sp"
            Widget:
"""
