type BlockNumber = int
type ChainId = int
type Tick = int
type Word = int
type BitmapWord = int
