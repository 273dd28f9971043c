"""Books shipped with the reader."""

from orenkniga.models.book import AuthorRef, BookRecord

_LIGHTHOUSE = """\
The lighthouse on Kettle Point had been dark for eleven years when Mara Vell \
climbed the spiral stairs with a lantern in one hand and the keeper's ledger \
in the other. The iron steps rang under her boots. Somewhere above, a gull \
had found its way in through a broken pane and was complaining about it to \
no one in particular.

She had bought the tower at auction for less than the price of a good boat. \
The town clerk had looked at her over his spectacles and asked whether she \
understood that the light would never be lit again, that the shipping lanes \
had moved north, that the nearest grocer was forty minutes away by a road \
that washed out every spring. She had said yes to all of it and signed.

The lamp room was smaller than she had imagined. The great lens sat in its \
brass cradle like a sleeping animal, furred with dust and salt. When she \
wiped a corner of it with her sleeve the lantern light broke into a hundred \
pieces and scattered over the walls, and for a moment the whole room seemed \
to turn.

She opened the ledger on the sill. The last entry was written in a careful, \
slanting hand: "Fog from the south-west. Lamp trimmed at dusk. No vessels \
sighted. Wind rising." Below it the page was blank, and every page after \
that was blank too, as though the keeper had simply set down his pen and \
walked out into the weather.

Mara read the entry three times. Then she took a pencil from her coat, \
dated the next line, and wrote: "Arrived. Lamp dark. One gull."

The first weeks were work and nothing else. She replaced the broken panes \
with plywood until the glazier could come from the mainland. She scrubbed \
the keeper's cottage down to the boards, burned the mouse-eaten mattress on \
the shingle and slept on a camp bed beside the stove. In the evenings she \
climbed the tower and wrote a line in the ledger, because it seemed wrong \
to leave it empty now that someone was there to keep it.

The town came to look at her in ones and twos. The postmistress brought a \
loaf of bread and a list of questions. A boy of about twelve came on a \
bicycle and stood at the gate for a long time without saying anything, and \
when Mara waved he waved back and pedalled away as if he had been caught at \
something. Old Teodor, who had crewed the supply boat when the light was \
still working, came and sat on the bench by the door and told her, without \
being asked, exactly how the keeper had trimmed the wick.

"He never missed a night," Teodor said. "Not in thirty years. Storm or calm, \
he was up those stairs at dusk. People set their clocks by it."

"What happened to him?"

Teodor looked out at the water for a while. "The company sent a letter," he \
said at last. "Said the light was no longer required. He read it on that \
bench where you're sitting. Next morning he was gone. Took the early bus, \
they said. Never wrote to anyone."

That night Mara climbed the stairs later than usual. The fog had come in \
from the south-west, thick and soft, and the foghorn on the new buoy out by \
the shoals was sounding its slow two notes. She stood by the lens and \
listened to it, and thought about a man reading a letter on a bench.

Then she went down to the store room, found the last can of lamp oil \
behind a stack of rotting sailcloth, and carried it up.

It took her most of an hour to work out the mechanism. The wick was stiff \
and the clockwork that turned the lens had not moved in a decade. But the \
keeper had left everything oiled and wrapped, as if he had expected someone \
to come, and when she finally struck the match the flame caught, and held, \
and grew.

The lens began to turn. Out across the fog, faint and then stronger, the \
beam swept the water once, twice, three times.

In the ledger, under the date, she wrote: "Fog from the south-west. Lamp \
lit at dusk. No vessels sighted. Someone is home."
"""

_ORCHARD = """\
Every autumn my grandmother made a list of the apple trees in her orchard \
and what each one had given that year. The list was never the same twice.

Some trees were generous every season. Others sulked for years and then, \
without warning, bent their branches to the ground with fruit.

"You cannot argue with a tree," she told me. "You can only write down what \
it did, and be grateful, and try again next year."
"""

BUILTIN_BOOKS: list[BookRecord] = [
    BookRecord(
        id="1",
        title="The Keeper's Ledger",
        author=AuthorRef(id="3", name="Ilse Marrow"),
        description="A woman buys a decommissioned lighthouse and finds the last keeper's log.",
        genres=["Fiction", "Short story"],
        rating=4.8,
        review_count=1240,
        published_date="2021-04-12",
        content=_LIGHTHOUSE,
    ),
    BookRecord(
        id="2",
        title="The Orchard List",
        author=AuthorRef(id="4", name="Pavel Drozd"),
        description="A short sketch about patience and apple trees.",
        genres=["Fiction", "Vignette"],
        rating=4.7,
        review_count=983,
        published_date="2019-09-30",
        content=_ORCHARD,
    ),
]
