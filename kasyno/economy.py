"""Everyday money commands: balance, work, odd jobs, crime and help."""

from __future__ import annotations

import random

from kasyno.database import DbManager
from kasyno.replies import BLUE, GREEN, RED, Embed, Reply

WORK_COOLDOWN = 30
SLUT_COOLDOWN = 300
CRIME_COOLDOWN = 60 * 60
UNLOCK_THRESHOLD = 100

WORK_RESPONSES = (
    "Skosiłeś trawnik u sąsiada. Jest on wdzięczny i zapłacił ci okrągłe {amount} dolarów!",
    "Sprzedawałeś lemoniadę na rogu. Mało oryginalna praca i duża konkurencja ze strony "
    "darmozja... znaczy, kolegów, ale zarobiłeś {amount} dolarów.",
    "Jakiś gość ci zapłacił {amount} dolarów za naprawę komputera, gdzie po prostu trzeba "
    "było wywalić bloatware z menu start. :wilted_rose:",
    "Schronisko dla psów się odezwało i zaoferowało {amount} dolarów za sprzątanie po psich "
    "kupach, a ty zaakceptowałeś tą ofertę i to zrobiłeś.",
)

SLUT_RESPONSES = (
    "Wygrałeś w \"przyjacielskiego\" pokera i przegrany wyskoczył z {amount} dolarów, "
    "które ty otrzymałeś!",
    "Nudziło ci się i wraz z Natalią shackowałeś Pentagon, leakując rządowe dokumenty do "
    "dark-webowej grupy hakerów, która zapłaciła za nie okrągłe {amount} dolarów.",
    "Gratulacje! Właśnie wygrałeś kartę podarunkową Biedronki O OSZAŁAMIAJĄCEJ WARTOŚCI 200 "
    "DOLARÓW! Czy ty nie widzisz, ile za to kupisz? Czy ty nie widzisz tej mocy prezentów dla "
    "rodziny? Tyle możesz zrobić z taką kartą podarunkową! Wystarczy, że ostatnio otrzymany "
    "hajs w wysokości {amount}, jakim jest twoja nadwyżka podatkowa z lat 2001-2004 przelejesz "
    "na konto naszego CEO, któremu recently zmarła babcia.",
    "Kasyno w okolicy dało Ci {amount} dolarów za wystawienie pewnej rzeczy in public. "
    "Ci którzy wiedzą, wiedzą...",
)

SLUT_FAIL_RESPONSES = (
    "Próbowałeś grać w pokera w ogrodzie, ale wjechałeś w krasnala ogrodowego. Właściciel się "
    "wkurzył i kazał zapłacić {amount} dolarów kary!",
    "Sanepid zamknął Twoje stoisko z lemoniadą. Chamski, prawda? Zabija młodych "
    "przedsiębiorców. Jeszcze grzywnę nałożył. Aż {amount} dolarów. O ja piernicze...",
    "Nie mając prawa jazdy wjechałeś w pieszego. Nic się mu nie stało, ale za uszkodzenie "
    "ciała, uszczerbek na zdrowiu i jazdę bez biletu... znaczy prawa jazdy musiałeś zapłacić "
    "{amount} dolarów.",
)

CRIME_RESPONSES = (
    "Okradłeś bank, a ekspedienta, bojąc się, że ją zabijesz najnowszym AK-47 Remastered, "
    "wyskoczyła z {amount} dolarów. Właściwie to z większej kwoty. Ale ty nie chciałeś aż tak "
    "wielkiej afery i zabrałeś tylko to.",
    "Znowu skontaktowałeś się z Natalią by shackować losowe strony na internecie. I nie "
    "zgadłeś. Shackowałeś walone Neocities. Wszystkie pieniądze supportersów są twoje, czyli "
    "nawet {amount} dolarów.",
    "Sprzedałeś znalezionego na ziemii iPhone 17 ultra pro max super proffessional ultimate "
    "i zyskałeś {amount} dolarów.",
    "Właśnie wbiłeś na pokład samolotu i odpaliłeś tam bombę. Wszyscy zginęli. Ale ty miałeś "
    "spadochron. Tobie nic się nie stało, a nawet ukradłeś rzeczy o łącznej wartości {amount} "
    "dolarów.",
    "Tobie coś odwaliło. Udało ci się obrabować skarbiec królowej Anglii i zaj*... znaczy "
    "wziąć uczciwie... aż {amount} dolarów! Królowa natychmiast dodała kwadrylion nowych "
    "zabezpieczeń. Ciekawe czy przełamiesz je drugi raz, by wziąć wypłatę po raz kolejny.",
    "Właśnie shackowałeś swoją szkołę i wpisałeś każdemu uczniowi tryliard szóstek. "
    "Nauczycielom zajęło ponad 5 dni roboczych, by manualnie usunąć cały ten chaos. Przy "
    "okazji okazało się, że nigdy nie została back-up'owana baza danych. Nauczyciel "
    "informatyki wypłacił Ci bug bounty w wysokości {amount} dolarów. Pomyśleć, że to zostało "
    "zrobione w 10 minut używając Metasploit.",
)

CRIME_FAIL_RESPONSES = (
    "Zapłaciłeś lotnisku {amount} dolarów kary, za próbę wniesienia bomby na pokład samolotu.",
    "Sprzedawca zoorientował się, że wciskasz mu kradzionego iPhone 17 ultra pro max super "
    "proffessional ultimate; wezwał policję i zażądał od ciebie {amount} dolarów.",
    "Nie udało Ci się oscamować rządu Brazylii, że liczba dziesiętnaście istnieje i nasłali "
    "na Ciebie wywiad. Na szczęście przekupiłeś go grzywną w wysokości {amount} dolarów.",
    "Królowa Anglii się skapnęła, że ktoś jej grzebie w skarbcu. Wezwała FBI i CIA. FBI "
    "prawie Cię zabiło najnowszym karabinem maszynowym AK-47 Ultra Russian Version Remastered "
    "Pro Max i zaczęło wymagać {amount} dolarów, które ty zapłaciłeś, by cię nie zabili do "
    "końca. Ty z kolei pozwałeś FBI i cudem uniknąłeś kolejnej kary. Niestety pozwu nie "
    "wygrałeś.",
    "Pomyślałeś więc, że wejdziesz do urzędu skarbowego i nałożysz podatek w wysokości 78 "
    "kwadryliardów złotych na swojego somsiada, który puszcał muzykę w nocy. Niestety, byłeś "
    "głupi i zapomniałeś wyłączyć kamer narzędziem od Natalii, więc policja obywatelska... "
    "znaczy milicja obywatelska... znaczy policja, czy jakoś tak, zamknęła Cię w więzieniu. "
    "Wyszłeś za kaucją wynoszącą {amount} dolarów.",
)

HAZARD_COMMANDS = (
    "- **automaty**: Generalnie używasz `slots` i możesz po tym podać kwotę jaką chcesz "
    "obstawić na automatach. Daje to bardzo duże zyski, ale jest mała szansa na wygraną...",
    "- **rzut monetą**: To jest useful w pierwszych fazach gry, ale potem zbytnio nie, bo jest "
    "zbyt OP. Używasz tego generalnie tak, że `coinflip` i potem albo h albo t, a następnie no "
    "to ile stawiasz.",
    "- **blackjack**: Absolutny klasyk gatunku. Używasz `blackjack` i potem dajesz liczbę. "
    "Wtedy zyskasz super hajs, jak umiesz w to grać.",
    "- **dice**: Co tu dużo mówić... Losujemy Ci liczbę od 1 do 100 no i masz ten... jak "
    "zdobędziesz więcej niż 55 to wygrywasz. Używasz `dice` i potem dajesz kwotę zakładu.",
    "- **crash**: Też fajna gra, generalnie inwestujesz w shady akcje i patrzysz jak twoje "
    "pieniądze rosną. Musisz uciec zanim się j*bną na łeb i na szyję.",
    "- **scratch**: Zdrap zdrapke Lotto! Jedna z najciekawszych gier, w które zostało włożone "
    "najwięcej czasu; dynamicznie generowane są bowiem symbole i wygrane, które pojawiają się "
    "na zdjęciu.",
)

_LOCKED_TITLE = "⏳ Jeszcze nie odblokowałeś slut i crime"
_LOCKED_DESCRIPTION = (
    "Wróć jak zdobędziesz co najmniej 100$ łącznie w portfelu i w banku. Po prostu łatwo "
    "jest tu przewalić hajs do minusowego poziomu, więc to taka blokada bezpieczeństwa."
)


def _money(value: float) -> str:
    """Format an amount the way the bot displays money."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _locked_reply() -> Reply:
    return Reply(embed=Embed(title=_LOCKED_TITLE, description=_LOCKED_DESCRIPTION, color=RED))


def balance(db: DbManager, user_id: int, name: str, avatar_url: str) -> Reply:
    """Show a member's cash, bank and total."""
    user = db.ensure_member(user_id).user
    embed = Embed(
        title=f"Pieniądze materialisty {name}",
        color=BLUE,
        thumbnail=avatar_url,
    )
    embed.add_field("Gotówka", f"`{_money(user.cash)}` 💵", True)
    embed.add_field("Bank", f"`{_money(user.bank)}` 💳", True)
    embed.add_field("Suma", f"**`{_money(user.total())}`** 💰", False)
    return Reply(embed=embed)


def work(db: DbManager, user_id: int, rng: random.Random, now: int) -> Reply:
    """Earn a small, safe amount of cash; limited by a short cooldown."""
    data = db.ensure_member(user_id)
    time_passed = now - data.timeouts.last_work
    if time_passed < WORK_COOLDOWN:
        remaining = WORK_COOLDOWN - time_passed
        return Reply(
            embed=Embed(
                title="⏳ Nie możesz stać się pracoholikiem.",
                description=(
                    "Twoi koledzy powiedzieli ci, że \"nadgorliwość gorsza od faszyzmu\". "
                    "Pewnie dlatego, że nie chcą, by szefowstwo zobaczyło co umiesz i zaczęło "
                    "więcej wymagać. Nie chcą pracować ig. Ty niestety nie masz odwagi by im "
                    f"się sprzeciwić. :wilted_rose:\n\nWróć za: **{remaining} sekund**."
                ),
                color=RED,
            )
        )

    amount = rng.uniform(24.66, 200.0)
    description = rng.choice(WORK_RESPONSES).replace("{amount}", _money(amount))

    db.change_cash(user_id, amount)
    db.update_timeout(user_id, "last_work", now)

    return Reply(embed=Embed(title="⚒️ Udało się!", description=description, color=GREEN))


def slut(db: DbManager, user_id: int, rng: random.Random, now: int) -> Reply:
    """A risky odd job: usually pays, sometimes costs half the stake."""
    data = db.ensure_member(user_id)
    if data.user.total() < UNLOCK_THRESHOLD:
        return _locked_reply()

    time_passed = now - data.timeouts.last_slut
    if time_passed < SLUT_COOLDOWN:
        remaining = SLUT_COOLDOWN - time_passed
        return Reply(
            embed=Embed(
                title="⏳ Ahhhhhh ta twoja niecierpliwość!",
                description=(
                    "Myślałeś, że nie masz ADHD? Że umiesz wysiedzieć w jednym miejscu bez "
                    "wiercenia się i bez pracy? Nie, nie umiesz. :wilted_rose:\n\nDaję ci "
                    f"challenge - wróć za: **{remaining} sekund**, a nie za 5 femtosekund."
                ),
                color=RED,
            )
        )

    chance = rng.randrange(100)
    amount = rng.uniform(50.0, 350.0)
    succeeded = chance < 60
    if succeeded:
        template = rng.choice(SLUT_RESPONSES)
    else:
        amount /= 2.0
        template = rng.choice(SLUT_FAIL_RESPONSES)
    description = template.replace("{amount}", _money(amount))

    if succeeded:
        db.change_cash(user_id, amount)
        db.update_timeout(user_id, "last_slut", now)
        return Reply(
            embed=Embed(
                title="⚒️ Praca dorywcza czasem przynosi efekty...",
                description=description,
                color=GREEN,
            )
        )

    db.change_cash(user_id, -amount)
    db.update_timeout(user_id, "last_work", now)
    return Reply(
        embed=Embed(
            title="❌ Za dużo byś chciał. Nie tym razem.",
            description=description,
            color=RED,
        )
    )


def crime(db: DbManager, user_id: int, rng: random.Random, now: int) -> Reply:
    """A very unlikely but very lucrative crime; failure brings a fine."""
    data = db.ensure_member(user_id)
    if data.user.total() < UNLOCK_THRESHOLD:
        return _locked_reply()

    time_passed = now - data.timeouts.last_crime
    if time_passed < CRIME_COOLDOWN:
        remaining = CRIME_COOLDOWN - time_passed
        return Reply(
            embed=Embed(
                title="⏳ Może trochę rozwagi?",
                description=(
                    "Zachciało Ci się coś porobić nielegalnego. Okej. Rozumiem. Nie będę Cię "
                    "osądzać. Ale jeszcze jest za głośno o tamtej aferze. Ludzie cię szukają. "
                    "Jesteś na listach policji, Interpolu, Europolu, wszędzie jesteś. Weź "
                    "trochę zaczekaj jak nie chcesz zdradzić gdzie się ukrywasz. Musisz "
                    f"zaczekać {remaining} sekund"
                ),
                color=RED,
            )
        )

    chance = rng.randrange(100)
    how_much = rng.randint(3000, 7000)

    if chance < 20:
        description = rng.choice(CRIME_RESPONSES).replace("{amount}", str(how_much))
        db.add_cash(user_id, how_much)
        db.update_timeout(user_id, "last_work", now)
        return Reply(
            embed=Embed(
                title="⚒️ Przestępstwo się opłaciło",
                description=description,
                color=GREEN,
            )
        )

    loss = how_much // 4
    description = rng.choice(CRIME_FAIL_RESPONSES).replace("{amount}", str(loss))
    db.remove_cash(user_id, loss)
    db.update_timeout(user_id, "last_crime", now)
    return Reply(
        embed=Embed(
            title="❌ FBI czy tam kto inny Ci przeszkodził i nałożył grzywnę",
            description=description,
            color=RED,
        )
    )


def help_reply() -> Reply:
    """An overview of the available commands."""
    embed = Embed(title="Witaj w ekonomii!")
    embed.add_field(
        "Komendy",
        "Generalnie na chwilę obecną możesz używać prawie każdej komendy oprócz hazardu jak "
        "w każdym innym bocie ekonomicznym tj. `bal`, `withdraw`, `work`, `slut`, `crime`, "
        "`deposit`, `ping`, `pay`, `rob`, `topmoney`, `shop`, `buy`. Są też popularne "
        "aliasy, np. `deposit` -> `dep`. To dalej alpha, więc trochę niedopracowane, ale "
        "lepsze to niż nic.",
        False,
    )
    embed.add_field("Hazard", "\n".join(HAZARD_COMMANDS), False)
    embed.add_field(
        "Pomoc w tworzeniu",
        "Jeżeli chcesz pomóc w tworzeniu tego bota, no to możesz zgłosić pull request z "
        "jakąś funkcją, poprawką, czy czymkolwiek. Jakby coś, to tylko ekonomia.",
        False,
    )
    return Reply(embed=embed)