from __future__ import annotations

from venue_booking.domain.entities.catalog import AddOn, Cake, CakePrices, EventType

_IMG = "https://i.pinimg.com/736x"

ADD_ONS: tuple[AddOn, ...] = (
    AddOn(id="1", name="Rose", price=99, image=f"{_IMG}/ed/fe/5a/edfe5a4351b8ba8db94863713f25945a.jpg"),
    AddOn(id="2", name="LED HBD", price=119, image=f"{_IMG}/24/5b/cc/245bcc1f3f850d23301416b4cfe8268f.jpg"),
    AddOn(id="3", name="Fog Entry", price=899, image=f"{_IMG}/2c/b4/d4/2cb4d454ec94675ab6aaf3a23d537cce.jpg"),
    AddOn(id="4", name="Fog Entry + Cold Fire (2)", price=1599, image=f"{_IMG}/2c/b4/d4/2cb4d454ec94675ab6aaf3a23d537cce.jpg"),
    AddOn(id="5", name="Fog Entry + Cold Fire (4)", price=2299, image=f"{_IMG}/2c/b4/d4/2cb4d454ec94675ab6aaf3a23d537cce.jpg"),
    AddOn(id="6", name="Photo Props", price=189, image=f"{_IMG}/20/63/0e/20630ecad25db83d32774bb1b2c175c3.jpg"),
    AddOn(id="7", name="Bouquet", price=499, image=f"{_IMG}/92/7e/5c/927e5c6d01965b9ea9e898ad410c39e1.jpg"),
    AddOn(id="8", name="LED Name Letters", price=299, image=f"{_IMG}/5e/55/6c/5e556c368ccca863b363a2ce5eb45047.jpg"),
    AddOn(id="9", name="Table Décor", price=349, image=f"{_IMG}/c9/29/38/c92938bd766aad79e76bdf0372eb5c7c.jpg"),
    AddOn(id="10", name="Candles", price=199, image=f"{_IMG}/cf/45/65/cf4565965b293db6bfaa32e466fe81e7.jpg"),
    AddOn(id="11", name="Photoshoot (30 mins)", price=600, image=f"{_IMG}/90/fc/9a/90fc9ab1deee5e949f6821ce9b0ce1c3.jpg"),
    AddOn(id="12", name="Photoshoot (60 mins)", price=1200, image=f"{_IMG}/90/fc/9a/90fc9ab1deee5e949f6821ce9b0ce1c3.jpg"),
    AddOn(id="13", name="Sash & Crown", price=199, image=f"{_IMG}/39/6b/d0/396bd0c5605d516457c8bd788659c60f.jpg"),
    AddOn(id="14", name="Cold Fire", price=700, image=f"{_IMG}/bc/19/84/bc1984a1557b2f4809e8975810d5556e.jpg"),
    AddOn(id="15", name="Candle Faith", price=199, image=f"{_IMG}/fa/b6/b6/fab6b6d775637cfdfdad3ff2ee401b17.jpg"),
    AddOn(id="16", name="Fog Effect", price=499, image=f"{_IMG}/e2/23/72/e22372b9774e96573ea2da424a8f7c1e.jpg"),
    AddOn(id="17", name="LOVE", price=99, image=f"{_IMG}/f0/4e/04/f04e042d1645e3642e139d6614d3fc34.jpg"),
    AddOn(id="18", name="LED Numbers", price=99, image=f"{_IMG}/1b/63/74/1b63740cf559f6235ff780140a8f6e93.jpg"),
)

EVENT_TYPES: tuple[EventType, ...] = (
    EventType(id="1", name="Birthday", icon=f"{_IMG}/7f/72/62/7f7262dd76de0b48c8f6bf89f7a3e858.jpg"),
    EventType(id="2", name="Anniversary", icon=f"{_IMG}/ea/41/09/ea410938cbccbcaabeccaea475d25a69.jpg"),
    EventType(id="3", name="Romantic Date", icon=f"{_IMG}/fb/ad/b2/fbadb2cccd254c42024ea42b5f094cd1.jpg"),
    EventType(id="4", name="Marriage Proposal", icon=f"{_IMG}/c5/fd/8e/c5fd8e6bb46c53b9e1cf93d6b4e175bf.jpg"),
    EventType(id="5", name="Groom to Be", icon=f"{_IMG}/46/b3/18/46b318658414707800b1e9bdf2413ef0.jpg"),
    EventType(id="6", name="Bride to Be", icon=f"{_IMG}/6f/62/3d/6f623d1bffe536ec5c73416caba88ce4.jpg"),
    EventType(id="7", name="Baby Shower", icon=f"{_IMG}/ee/de/44/eede44e50910d32705ec7a3a0195cbf0.jpg"),
    EventType(id="8", name="Private Party", icon=f"{_IMG}/2b/de/51/2bde51a9f7003b5faa601c49cd5e6c56.jpg"),
)

_CLASSIC = CakePrices(egg_half_kg=500, egg_one_kg=950, eggless_half_kg=550, eggless_one_kg=1100)
_PREMIUM = CakePrices(egg_half_kg=550, egg_one_kg=1000, eggless_half_kg=600, eggless_one_kg=1200)
_CHOCOLATE = CakePrices(egg_half_kg=600, egg_one_kg=1100, eggless_half_kg=650, eggless_one_kg=1300)

CAKES: tuple[Cake, ...] = (
    Cake(id="1", name="Vanilla", image=f"{_IMG}/65/34/ce/6534cec088245f1a0225f8ef3826e079.jpg", prices=_CLASSIC),
    Cake(id="2", name="Strawberry", image=f"{_IMG}/7d/15/cf/7d15cf3ff0d63448d6c4705ec9314747.jpg", prices=_CLASSIC),
    Cake(id="3", name="Butterscotch", image=f"{_IMG}/30/a2/ce/30a2cedb77fe4fa77441bf75ea4fe1da.jpg", prices=_CLASSIC),
    Cake(id="4", name="Pineapple", image=f"{_IMG}/20/51/5e/20515ea1e1e2cfbc31541b445a83d065.jpg", prices=_CLASSIC),
    Cake(id="5", name="Blueberry", image=f"{_IMG}/be/80/34/be80346650353263b5b5980f33fbb0a5.jpg", prices=_PREMIUM),
    Cake(id="6", name="Pista Malai", image=f"{_IMG}/08/24/39/0824396acb812abae218a3d6c77aa3e1.jpg", prices=_PREMIUM),
    Cake(id="7", name="Choco Truffle", image=f"{_IMG}/a3/b6/33/a3b6333b7224bb92924f051fbca3626d.jpg", prices=_CHOCOLATE),
    Cake(id="8", name="Chocolate Kitkat", image=f"{_IMG}/4d/bd/b5/4dbdb5fb766e5a02e9f577a94cd560ef.jpg", prices=_CHOCOLATE),
    Cake(id="9", name="White Forest", image=f"{_IMG}/9a/61/2e/9a612e67f61c976fc76fb45edc531c0b.jpg", prices=_CHOCOLATE),
    Cake(id="10", name="Black Forest", image=f"{_IMG}/21/d5/9b/21d59b01752770c492cd56edb69000d4.jpg", prices=_CHOCOLATE),
)
